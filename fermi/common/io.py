"""Persistence of estimate records (JSONL) and sweep tables (CSV)."""

import json
import pandas as pd
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

# Insight text carries non-ASCII punctuation
ENCODING = "utf-8"


def save_jsonl(records: Iterable[Dict[str, Any]], filepath: Union[str, Path], append: bool = False) -> int:
    """Write one JSON object per line, returning how many were written."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(filepath, 'a' if append else 'w', encoding=ENCODING) as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False) + '\n')
            count += 1
    return count


def load_jsonl(filepath: Union[str, Path]) -> List[Dict[str, Any]]:
    """Records from a JSONL file, skipping blank lines."""
    with open(filepath, 'r', encoding=ENCODING) as f:
        return [json.loads(line) for line in f if line.strip()]


def save_csv(table: pd.DataFrame, filepath: Union[str, Path]) -> None:
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(filepath, index=False, encoding=ENCODING)


def load_csv(filepath: Union[str, Path], required_columns: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """Read a saved table, raising ValueError if expected columns are absent."""
    table = pd.read_csv(filepath, encoding=ENCODING)
    missing = [column for column in (required_columns or ()) if column not in table.columns]
    if missing:
        raise ValueError(f"{filepath} is missing columns: {', '.join(missing)}")
    return table
