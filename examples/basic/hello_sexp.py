"""Parse and re-encode an S-expression in 3 lines."""

from sexpline import encode, parse

tree = parse("(greeting  hello  5#776f726c64#)")
print(encode(tree))
