"""Replace inside a segmented buffer without joining it first."""

from pinzas import Pattern, StringBuilder

buffer = StringBuilder()
buffer.append("Hello {").append("{user}").append("}, you have {{n}} new ").append("messages.")

values = {"user": "Ada", "n": "3"}
placeholder = Pattern("{{", "}}", include_bounds=True)
out = placeholder.replace_with(buffer, lambda m: values.get(m.value[2:-2]))

print("Input segments: ", buffer.part_count)
print("Output segments:", out.part_count)
print(out.build())
