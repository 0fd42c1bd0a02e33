"""Human-readable byte sizes."""


def format_size(size_bytes: int) -> str:
    """Format bytes to a human-readable string (binary units, two decimals)."""
    kb = size_bytes / 1024
    mb = kb / 1024
    gb = mb / 1024

    if gb >= 1:
        return f"{gb:.2f} GB"
    elif mb >= 1:
        return f"{mb:.2f} MB"
    elif kb >= 1:
        return f"{kb:.2f} KB"
    else:
        return f"{size_bytes} B"
