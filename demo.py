"""
Binary Heap Demo -- Extraction order, arbitrary removal, comparer call counts
and timing benchmarks against heapq and sorted().

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import heapq
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import Heap, HeapType, natural_compare

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}

BENCH_SIZES = [1_000, 2_000, 4_000, 8_000, 16_000, 32_000]
N_RUNS = 3


class CountingComparer:
    def __init__(self):
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return natural_compare(a, b)


# ---------------------------------------------------------------------------
# Example 1: Extraction Order
# ---------------------------------------------------------------------------
def example_1_extraction_order():
    """Pop order for both heap types, and the level-order layout iteration exposes."""
    print("=" * 60)
    print("Example 1: Extraction Order")
    print("=" * 60)

    values = [5, 1, 2, 0, 6]
    results = {}
    for heap_type in (HeapType.MAX_HEAP, HeapType.MIN_HEAP):
        heap = Heap(heap_type=heap_type)
        for v in values:
            heap.push(v)
        layout = list(heap)
        popped = [heap.pop() for _ in range(len(values))]
        results[heap_type] = (layout, popped)
        print(f"  {heap_type.name:<9} layout={layout}  popped={popped}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 4))
    for ax, (heap_type, (layout, popped)) in zip(axes, results.items()):
        x = np.arange(len(values))
        ax.bar(x - 0.2, layout, width=0.4, color=COLORS["blue"], label="array (level) order")
        ax.bar(x + 0.2, popped, width=0.4, color=COLORS["orange"], label="pop order")
        ax.set_xticks(x)
        ax.set_title(heap_type.name, fontsize=11, fontweight="bold")
        ax.set_xlabel("Position")
        ax.grid(True, alpha=0.3, axis="y")
        ax.legend(fontsize=8)
    fig.suptitle(f"Pushing {values}: iteration order vs pop order", fontsize=13, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_extraction_order.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_extraction_order.png")


# ---------------------------------------------------------------------------
# Example 2: Arbitrary Removal
# ---------------------------------------------------------------------------
def example_2_removal():
    """Remove arbitrary values and check the root after each removal."""
    print("\n" + "=" * 60)
    print("Example 2: Arbitrary Removal")
    print("=" * 60)

    heap = Heap()
    for v in [5, 1, -1, 0, 6]:
        heap.push(v)
    print(f"  start:        {list(heap)}")
    for target in [6, 1, 42, 5]:
        removed = heap.remove(target)
        print(f"  remove({target:>2}) -> {str(removed):<5}  layout={list(heap)}  peek={heap.peek()}")

    sizes = np.arange(100, 2100, 200)
    removal_calls = []
    for n in sizes:
        counter = CountingComparer()
        heap = Heap(comparer=counter)
        for v in np.random.randint(0, 10 * n, size=n):
            heap.push(int(v))
        target = int(np.random.choice(list(heap)))
        counter.calls = 0
        heap.remove(target)
        removal_calls.append(counter.calls)

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(sizes, removal_calls, "o-", color=COLORS["red"], label="remove(x)")
    ax.plot(sizes, sizes, "--", color=COLORS["dark"], alpha=0.5, label="n")
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Comparer calls")
    ax.set_title("remove() is a linear scan plus O(log n) rebalancing", fontsize=11, fontweight="bold")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_removal_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_removal_cost.png")


# ---------------------------------------------------------------------------
# Example 3: Comparer Calls per Operation
# ---------------------------------------------------------------------------
def example_3_comparer_calls():
    """Average comparer calls for push and pop against log2(n)."""
    print("\n" + "=" * 60)
    print("Example 3: Comparer Calls per Operation")
    print("=" * 60)

    push_avg, pop_avg = [], []
    for n in BENCH_SIZES:
        counter = CountingComparer()
        heap = Heap(heap_type=HeapType.MIN_HEAP, comparer=counter)
        for v in np.random.rand(n):
            heap.push(float(v))
        push_avg.append(counter.calls / n)
        counter.calls = 0
        while heap:
            heap.pop()
        pop_avg.append(counter.calls / n)
        print(f"  n={n:>6}  push={push_avg[-1]:.2f}  pop={pop_avg[-1]:.2f}  log2(n)={np.log2(n):.2f}")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(BENCH_SIZES, push_avg, "o-", color=COLORS["blue"], label="push")
    ax.plot(BENCH_SIZES, pop_avg, "s-", color=COLORS["green"], label="pop")
    ax.plot(BENCH_SIZES, 2 * np.log2(BENCH_SIZES), "--", color=COLORS["dark"], alpha=0.5, label="2 log2(n)")
    ax.set_xscale("log")
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Comparer calls per operation")
    ax.set_title("Random input: push is O(1) on average, pop is O(log n)", fontsize=11, fontweight="bold")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_comparer_calls.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_comparer_calls.png")


# ---------------------------------------------------------------------------
# Example 4: Timing Benchmark
# ---------------------------------------------------------------------------
def _median_time(fn, data):
    times = []
    for _ in range(N_RUNS):
        start = time.perf_counter()
        fn(data)
        times.append(time.perf_counter() - start)
    return float(np.median(times))


def _heap_sort(data):
    heap = Heap(len(data), HeapType.MIN_HEAP)
    for v in data:
        heap.push(v)
    return [heap.pop() for _ in range(len(data))]


def _heapq_sort(data):
    h = []
    for v in data:
        heapq.heappush(h, v)
    return [heapq.heappop(h) for _ in range(len(data))]


def example_4_timing_benchmark():
    """Push-all-then-pop-all wall-clock time against heapq and sorted()."""
    print("\n" + "=" * 60)
    print("Example 4: Timing Benchmark")
    print("=" * 60)

    timings = {"Heap": [], "heapq": [], "sorted": []}
    for n in BENCH_SIZES:
        data = np.random.randint(0, 1_000_000, size=n).tolist()
        assert _heap_sort(data) == sorted(data)
        timings["Heap"].append(_median_time(_heap_sort, data))
        timings["heapq"].append(_median_time(_heapq_sort, data))
        timings["sorted"].append(_median_time(sorted, data))
        print(f"  n={n:>6}  " + "  ".join(f"{k}={v[-1] * 1000:8.2f} ms" for k, v in timings.items()))

    fig, ax = plt.subplots(figsize=(8, 5))
    for (name, ts), color in zip(timings.items(), [COLORS["red"], COLORS["blue"], COLORS["green"]]):
        ax.plot(BENCH_SIZES, np.array(ts) * 1000, "o-", color=color, label=name)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Number of elements")
    ax.set_ylabel(f"Median time of {N_RUNS} runs (ms)")
    ax.set_title("Push all, then pop all", fontsize=11, fontweight="bold")
    ax.grid(True, alpha=0.3, which="both")
    ax.legend()
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_timing_benchmark.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_timing_benchmark.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "One sift-up, one sift-down, two orderings",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "A MIN_HEAP swaps the comparer's operands, so the same algorithms\n"
            "that keep the greatest element at the root keep the smallest there.\n\n"
            "This demo covers:\n"
            "  1. Extraction order and level-order layout\n"
            "  2. Arbitrary removal by comparer equality\n"
            "  3. Comparer calls per push and pop\n"
            "  4. Wall-clock timing against heapq and sorted()\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            fig.suptitle(viz_file.stem.replace("_", " ").title(), fontsize=14, fontweight="bold", y=0.98)
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_extraction_order()
    example_2_removal()
    example_3_comparer_calls()
    example_4_timing_benchmark()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
