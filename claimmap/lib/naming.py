def to_snake_case(name: str) -> str:
    """
    PascalCase/camelCase -> snake_case.
    Every uppercase char except the first one gets a leading underscore,
    acronyms included ("ID" -> "i_d").
    """
    out = []
    for i, c in enumerate(name):
        if c.isupper() and i > 0:
            out.append("_")
        out.append(c.lower())
    return "".join(out)
