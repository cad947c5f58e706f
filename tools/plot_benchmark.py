import sys, os
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def main(p):
    df = pd.read_csv(p)
    df["size"] = df["H"].astype(str) + "x" + df["W"].astype(str)
    saved = []

    # Solve time vs wall density, one line per maze size
    t = df.groupby(["size", "density"])["time_s"].mean().reset_index()
    plt.figure(figsize=(7,4))
    for size, g in t.groupby("size"):
        plt.plot(g["density"], 1000.0 * g["time_s"], marker="o", label=size)
    plt.title("Average BFS solve time")
    plt.xlabel("Wall density")
    plt.ylabel("Time (ms)")
    plt.legend()
    out1 = os.path.join(os.path.dirname(p), "benchmark_time.png")
    plt.tight_layout(); plt.savefig(out1, bbox_inches="tight"); plt.close()
    print("Saved:", out1)
    saved.append(out1)

    # Success rate vs wall density
    s = df.groupby(["size", "density"])["success"].mean().reset_index()
    plt.figure(figsize=(7,4))
    for size, g in s.groupby("size"):
        plt.plot(g["density"], g["success"], marker="o", label=size)
    plt.title("Fraction of mazes with a path")
    plt.xlabel("Wall density")
    plt.ylabel("Success rate")
    plt.ylim(-0.05, 1.05)
    plt.legend()
    out2 = os.path.join(os.path.dirname(p), "benchmark_success.png")
    plt.tight_layout(); plt.savefig(out2, bbox_inches="tight"); plt.close()
    print("Saved:", out2)
    saved.append(out2)
    return saved


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python tools/plot_benchmark.py <path/to/benchmark.csv>")
        raise SystemExit(1)
    main(sys.argv[1])
