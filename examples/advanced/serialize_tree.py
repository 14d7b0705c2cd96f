"""Inspect a parsed tree as JSON, then restore it."""

from sexpline import parse
from sexpline.serialization import from_json, to_json

tree = parse("(key #00ff# |YWJj| (nested ()))")

json_str = to_json(tree, indent=2)
restored = from_json(json_str)

print(json_str)
print("Original == restored:", tree == restored)
