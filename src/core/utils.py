def format_ms(ms: int) -> str:
    """Format milliseconds as m:ss."""
    ms = max(0, int(ms))
    s = ms // 1000
    m = s // 60
    s = s % 60
    return f"{m}:{s:02d}"


def format_offset(seconds: float) -> str:
    """Format a lyrics offset as mm:ss.xx (centiseconds)."""
    cs_total = max(0, int(round(seconds * 100)))
    m = cs_total // 6000
    s = (cs_total // 100) % 60
    cs = cs_total % 100
    return f"{m:02d}:{s:02d}.{cs:02d}"
