import logging
import os

from mocoabm.config import setup_logging
from mocoabm.frontier import build
from mocoabm.io import read_segments, records_to_frame
from mocoabm.selector import run
from mocoabm.viz import ensure_dir, plot_anytime_curve, plot_selection

ensure_dir("results")
setup_logging(level=logging.INFO)

N_POINTS = 40

frontier = build(read_segments(os.path.join("data", "example_segments.txt")))
records = run(frontier, N_POINTS)

df = records_to_frame(records)
df.to_csv("results/anytime_report.tsv", sep="\t", index=False)

plot_selection(frontier, records, "results/anytime_selection.png")
plot_anytime_curve(records, "results/anytime_curve.png")

# points needed to reach each coverage level
for level in (0.5, 0.9, 0.99):
    hit = df[df["hv_relative"] >= level]
    k = int(hit["index"].iloc[0]) if len(hit) else None
    print(f"relative HV >= {level}: {k} point(s)")

print(f"hv_max = {frontier.hv_max:.6f}")
print("Wrote:")
print(" - results/anytime_report.tsv")
print(" - results/anytime_selection.png")
print(" - results/anytime_curve.png")
