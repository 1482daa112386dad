"""
Input/Output helpers for examples.
"""
import json
from pathlib import Path
from typing import Any, Dict, Union


def write_json(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write an example result to a JSON file, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, default=str)
    return p


def print_summary(result: Dict[str, Any]) -> None:
    """Print the config, metrics and artifacts sections of an example result."""
    print("=" * 60)
    print(f"EXAMPLE: {result.get('name', 'Unknown')}")
    for section in ("config", "metrics", "artifacts"):
        values = result.get(section)
        if not values:
            continue
        print("-" * 60)
        print(f"{section.capitalize()}:")
        for k, v in values.items():
            print(f"  {k}: {v}")
    print("=" * 60)
