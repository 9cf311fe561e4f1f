"""Trusted vs untrusted UTF-8 input.

append_bytes() is for bytes you know are whole characters. try_append_bytes()
hands back Err(DecodeError) instead, so the caller decides what happens next.
"""

from string_builder import Err, Ok, StringBuilder

sentence = "„Pelé hat alles verändert.".encode()

# Cut only at character boundaries
built = (
    StringBuilder.with_capacity(len(sentence))
    .append_bytes(sentence[:9])
    .append_bytes(sentence[9:18])
    .append_bytes(sentence[18:])
    .to_string()
)
print(built)

# Byte 7 is inside "é": the first slice ends mid-character
match StringBuilder().try_append_bytes(sentence[:7]):
    case Ok(builder):
        print("unexpected:", builder.to_string())
    case Err(error):
        print(f"{error.kind.value}: {error} (valid prefix: {sentence[: error.valid_up_to]!r})")
