import os
import numpy as np

os.makedirs("data", exist_ok=True)

# Piecewise-linear approximation of a concave trade-off curve y = 10 * (1 - (x / 11) ** 2)
# sampled at uneven breakpoints, with one hole where the efficient set is disconnected.
xs = np.array([1.0, 1.8, 3.0, 4.5, 6.0, 7.0])
xs2 = np.array([8.0, 8.5, 9.3, 10.0])

def curve(x: np.ndarray) -> np.ndarray:
    return 10.0 * (1.0 - (x / 11.0) ** 2)

rows = []
for part in (xs, xs2):
    ys = curve(part)
    for i in range(len(part) - 1):
        rows.append((part[i], ys[i], part[i + 1], ys[i + 1]))

np.savetxt("data/example_segments.txt", np.array(rows), fmt="%.6f")

print("Wrote:")
print(" - data/example_segments.txt")
print(f"{len(rows)} segments")
