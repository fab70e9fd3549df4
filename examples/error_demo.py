"""
Error reporting demonstration for plainjson.
"""

import plainjson
from plainjson import JSONDecodeError, ParseConfig, ParseLimits, SecurityError


def main():
    print("plainjson - Error Reporting Demo")
    print("=" * 32)

    # Example 1: lexical errors are all reported at once
    print("\n1. Every Lexical Error in One Pass")
    result = plainjson.parse_document("[1, @, 'two', 01]")
    for error in result.errors:
        print(f"- {error.message} (line {error.line})")

    # Example 2: parser errors stop at the first one
    print("\n2. First Syntax Error, with Context")
    try:
        plainjson.loads('{"key" "value"}')
    except JSONDecodeError as e:
        print("Error caught:")
        print(str(e))

    # Example 3: unclosed structure
    print("\n3. Error with Helpful Suggestions")
    try:
        plainjson.loads('{"key": "value"')
    except JSONDecodeError as e:
        print("Error caught:")
        print(str(e))

    # Example 4: multiline document
    print("\n4. Multiline JSON Error")
    multiline_json = '''
    {
        "name": "John Doe",
        "age": 30,
        "name": "Jane Doe"
    }
    '''
    result = plainjson.parse_document(multiline_json)
    print(f"Kind: {result.error.kind.value}")
    print(str(result.error))

    # Example 5: resource limits
    print("\n5. Resource Limits")
    config = ParseConfig(limits=ParseLimits(max_nesting_depth=3))
    try:
        plainjson.loads("[[[[1]]]]", config=config)
    except SecurityError as e:
        print("Error caught:")
        print(str(e))

    # Example 6: deep nesting with the explicit-stack parser
    print("\n6. Deep Nesting")
    deep = "[" * 100000 + "]" * 100000
    result = plainjson.parse_document(deep)
    print(f"Recursive parser: {result.error.message if result.error else 'ok'}")
    result = plainjson.parse_document(deep, ParseConfig(use_explicit_stack=True))
    print(f"Explicit stack:   {result.error.message if result.error else 'ok'}")


if __name__ == "__main__":
    main()
