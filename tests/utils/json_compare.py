from typing import Dict, Iterable


def exclude_keys(data: Dict, keys: Iterable[str]) -> Dict:
    """Drop volatile fields (ids, timestamps) before comparing a response body"""
    skip = set(keys)
    return {k: v for k, v in data.items() if k not in skip}
