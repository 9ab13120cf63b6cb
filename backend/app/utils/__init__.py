from app.utils.coercion import coerce_number, coerce_str

__all__ = [
    "coerce_number",
    "coerce_str",
]
