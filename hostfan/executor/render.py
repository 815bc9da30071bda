def render(template: str, placeholder_tag: str, hostname: str) -> str:
    return template.replace(placeholder_tag, hostname)
