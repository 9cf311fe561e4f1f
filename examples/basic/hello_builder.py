"""Build a string in one chain: zero config, zero deps."""

from string_builder import StringBuilder

greeting = StringBuilder.new().append("Hello").append(", ").append("World").to_string()
print(greeting)
