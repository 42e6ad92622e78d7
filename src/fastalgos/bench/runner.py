"""
Experiment runner: one benchmarking sweep driven by a YAML config.

Usage (from repo root):
    fastalgos-bench experiments/configs/01_quadratic_vs_nlogn.yaml
    python -m fastalgos.bench.runner experiments/configs/01_quadratic_vs_nlogn.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config actually used
    - meta.json               # python/numpy/pandas versions, cpu/ram, git commit
    - results.jsonl           # one JSON line per timing sample or failure
    - summary.csv             # median + IQR per (algo, n)

Design notes:
- Every algorithm sees the same generated input for a given size n.
- With `validate: true` the last output of each (algo, n) is checked against
  the oracle; a mismatch is recorded like an error.
- After a timeout, error or validation failure, larger sizes are skipped for
  that algorithm.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from fastalgos.algorithms import ALGORITHM_NAMES, ALGORITHMS
from fastalgos.bench.measure import time_sort_call
from fastalgos.compare import comparator_from_config
from fastalgos.datasets import make_dataset
from fastalgos.validate import equals_oracle, first_nondecreasing_violation_index

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)
SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]

_console = Console()

__all__ = ["AlgoSpec", "resolve_algorithms", "aggregate_summary", "run_experiment", "main"]


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Callable[..., List[Any]]
    config: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Experiment config must be a YAML mapping: {path}")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _make_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- algorithms & summary ------------------------- #

def resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    """
    Turn the `algorithms` list of an experiment config into AlgoSpecs.

    Entries look like {"name": <module>, "label": <optional>, "config": {...}}.
    The label (default: the name) must be unique, so one algorithm can be
    benchmarked under several configs.
    """
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if not isinstance(entry, dict):
            raise ValueError(f"Each algorithm entry must be a mapping; got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {name!r}. Available: {list(ALGORITHM_NAMES)}")
        label = entry.get("label", name)
        if not isinstance(label, str) or not label:
            raise ValueError(f"Algorithm '{name}': 'label' must be a non-empty string")
        if label in seen:
            raise ValueError(f"Duplicate algorithm label in config: {label}")
        seen.add(label)

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        mod = ALGORITHMS[name]
        specs.append(AlgoSpec(name=label, sort_fn=mod.sort, config=config))
    return specs


def aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    """Median, IQR, min and max of the successful samples per (algo, n)."""
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    grouped = df.groupby(["algo", "n"])["time_ns"]
    out = grouped.agg(
        samples_ok="count",
        median_ns="median",
        min_ns="min",
        max_ns="max",
    )
    out["iqr_ns"] = grouped.quantile(0.75) - grouped.quantile(0.25)
    out = out.reset_index()
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _check_output(spec: AlgoSpec, a: List[int], out: Optional[List[int]]) -> Optional[str]:
    if out is None:
        return None
    cmp = comparator_from_config(spec.config)
    if equals_oracle(a, out, cmp):
        return None
    i = first_nondecreasing_violation_index(out, cmp)
    if i is not None:
        return f"output out of order at index {i}: {out[i]!r} before {out[i + 1]!r}"
    return "output does not match the oracle (elements lost or duplicated)"


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [algo]
        for n in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                median_ms = int(s["median_ns"].iloc[0]) / 1e6
                iqr_ms = int(s["iqr_ns"].iloc[0]) / 1e6
                row.append(f"{median_ms:.2f} ± {iqr_ms:.2f}")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    """Run the sweep described by `config_path` and return the run directory."""
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    validate = bool(cfg.get("validate", False))
    dataset_spec = dict(cfg["dataset"])

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

    # Fail on bad algorithm entries before anything is written.
    algos = resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _make_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = {a.name: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for spec in algos:
            if skipped[spec.name]:
                continue

            res = time_sort_call(
                algo_name=spec.name,
                algo_fn=spec.sort_fn,
                a=base_a,
                config=spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                defensive_copy=True,
            )

            for trial, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial,
                        "time_ns": int(t_ns),
                        "config": spec.config,
                    },
                    results_path,
                )

            status, detail = res["status"], res["error"]
            if status == "ok" and validate:
                problem = _check_output(spec, base_a, res["last_output"])
                if problem is not None:
                    status, detail = "invalid", problem

            if status != "ok":
                skipped[spec.name] = True
                _append_jsonl(
                    {
                        "algo": spec.name,
                        "n": n,
                        "status": status,
                        "error": detail,
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "config": spec.config,
                    },
                    results_path,
                )
                _console.print(f"[yellow]{spec.name}[/yellow] stopped at n={n}: {status}" + (f" ({detail})" if detail else ""))

    summary_df = aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="fastalgos-bench",
        description="Run a sorting benchmark experiment from a YAML config.",
    )
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
