from typing import List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def csv_to_unique_list(v: str | List[str] | None) -> List[str]:
    """Like csv_to_list, but drops repeats (first occurrence wins)."""
    seen: set[str] = set()
    out: List[str] = []
    for s in csv_to_list(v):
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out
