# -*- coding: utf-8 -*-
"""
JSON Benchmark Store — file-based persistence for benchmark runs.

Stores each ``BenchmarkRun`` as an individual JSON file under a
``runs/`` directory, with a lightweight ``index.json`` for listing
without loading every run.

Storage layout::

    <base_dir>/
        index.json
        runs/
            <run_id>.json

License
-------
MIT License
See LICENSE file for full text.

Created
-------
2026-10-16

Modified
--------
2026-10-16
"""

# Standard library
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

# Internal
from medianbench.benchmarking.base import BenchmarkStore
from medianbench.benchmarking.models import BenchmarkRun


def _index_entry(run: BenchmarkRun) -> Dict[str, Any]:
    return {
        "run_id": run.run_id,
        "image_count": len(run.records),
        "chunk_size": run.config.get("chunk_size"),
        "executor": run.config.get("executor"),
        "created_at": run.created_at,
    }


class JSONBenchmarkStore(BenchmarkStore):
    """File-system store using one JSON file per run.

    Parameters
    ----------
    base_dir : Path or str, optional
        Root directory for storage.  Defaults to ``<cwd>/.benchmarks/``.
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        if base_dir is None:
            base_dir = Path.cwd() / ".benchmarks"
        self._base_dir = Path(base_dir)
        self._runs_dir = self._base_dir / "runs"
        self._index_path = self._base_dir / "index.json"

        self._runs_dir.mkdir(parents=True, exist_ok=True)

        if not self._index_path.exists():
            self._write_index([])

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def save(self, run: BenchmarkRun) -> str:
        """Write *run* to ``runs/<run_id>.json`` and index it."""
        run_path = self._runs_dir / f"{run.run_id}.json"
        run_path.write_text(run.to_json(), encoding="utf-8")

        index = [
            e for e in self._read_index() if e.get("run_id") != run.run_id
        ]
        index.append(_index_entry(run))
        self._write_index(index)

        return run.run_id

    def load(self, run_id: str) -> BenchmarkRun:
        run_path = self._runs_dir / f"{run_id}.json"
        if not run_path.exists():
            raise KeyError(f"No benchmark run found with ID: {run_id}")
        return BenchmarkRun.from_json(run_path.read_text(encoding="utf-8"))

    def list_runs(self, limit: int = 50) -> List[BenchmarkRun]:
        """Load up to *limit* runs, newest first.

        Index entries whose file has gone missing are skipped.
        """
        index = self._read_index()
        index.sort(key=lambda e: e.get("created_at", ""), reverse=True)

        runs: List[BenchmarkRun] = []
        for entry in index[:limit]:
            try:
                runs.append(self.load(entry["run_id"]))
            except KeyError:
                continue  # stale index entry
        return runs

    def delete(self, run_id: str) -> None:
        run_path = self._runs_dir / f"{run_id}.json"
        if not run_path.exists():
            raise KeyError(f"No benchmark run found with ID: {run_id}")
        run_path.unlink()

        index = [e for e in self._read_index() if e.get("run_id") != run_id]
        self._write_index(index)

    def rebuild_index(self) -> int:
        """Rebuild index.json from the run files on disk.

        Returns
        -------
        int
            Number of runs indexed.
        """
        entries: List[Dict[str, Any]] = []
        for path in sorted(self._runs_dir.glob("*.json")):
            try:
                run = BenchmarkRun.from_json(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, KeyError):
                continue  # corrupted file
            entries.append(_index_entry(run))

        self._write_index(entries)
        return len(entries)

    def _read_index(self) -> List[Dict[str, Any]]:
        if not self._index_path.exists():
            return []
        try:
            data = json.loads(self._index_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            return []
        return data if isinstance(data, list) else []

    def _write_index(self, entries: List[Dict[str, Any]]) -> None:
        """Write the index through a temp file and rename."""
        tmp_path = self._index_path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        tmp_path.replace(self._index_path)
