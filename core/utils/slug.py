import re


def slugify(title: str) -> str:
    """Lowercase, non-alphanumeric runs collapsed to '-', no leading/trailing '-'."""
    slug = re.sub(r"[^a-z0-9]+", "-", (title or "").lower())
    return slug.strip("-")
