"""Benchmark iniscan against the standard library configparser.

The two do different amounts of work: configparser builds a case-folded
section map, iniscan only classifies lines. The comparison shows the cost
of a full pass over the input.

Run with:
    python benchmarks/benchmark_vs_configparser.py
"""

import configparser
import time


def make_document(sections: int = 200, keys: int = 20) -> str:
    """Generate a synthetic INI document."""
    lines = []
    for s in range(sections):
        lines.append(f"[section{s}]")
        lines.append(f"; settings for section {s}")
        for k in range(keys):
            lines.append(f"key{k} = value {s}.{k}")
        lines.append("")
    return "\n".join(lines)


def benchmark_iniscan(doc: str, iterations: int = 20) -> float:
    """Benchmark a full scan with iniscan."""
    from iniscan import Parser

    for _ in Parser(doc):
        pass

    start = time.perf_counter()
    for _ in range(iterations):
        for _ in Parser(doc):
            pass
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def benchmark_configparser(doc: str, iterations: int = 20) -> float:
    """Benchmark configparser.read_string."""
    start = time.perf_counter()
    for _ in range(iterations):
        cp = configparser.ConfigParser(interpolation=None)
        cp.read_string(doc)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def main() -> None:
    doc = make_document()
    print(f"Document: {len(doc):,} chars, {doc.count(chr(10)) + 1:,} lines")
    print()

    results = {
        "iniscan": benchmark_iniscan(doc),
        "configparser": benchmark_configparser(doc),
    }

    baseline = results["iniscan"]
    for name, seconds in results.items():
        print(f"{name:<14} {seconds * 1000:8.2f} ms  ({seconds / baseline:.2f}x)")


if __name__ == "__main__":
    main()
