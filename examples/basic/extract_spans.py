"""Pull delimited spans out of text in a few lines, zero config, zero deps."""

from pinzas import Pattern

template = "Dear {{name}}, your order {{order_id}} ships {{date}}."
for m in Pattern("{{", "}}").matches(template):
    print(m.start, m.value)

print(Pattern("(", ")", allow_nesting=True).match("f(a, g(b, c))").value)
print(Pattern("<", ">", longest=True).match("<a>b> tail").value)
