"""
Dubins Path Planning Example
=============================

This example plans a Dubins path and samples it, both with the pure Python
sampler and with the CasADi evaluator.
"""

import numpy as np

from dubins_path import Pose, candidate_paths, sample_array, shortest_path

# Define start and goal configurations
start = Pose(0.0, 0.0, 0.0)  # x, y, heading (radians)
goal = Pose(10.0, 5.0, np.pi / 2)

R = 2.0  # Turn radius

# Plan the path
path = shortest_path(start, goal, R)

print(f"Path Type: {path.word}")
print(f"Total Length: {path.length:.4f}")
for i, seg in enumerate(path.segment_geometry()):
    print(f"Segment {i} ({seg.kind.letter}): length={seg.length:.4f}")

print("\nAll feasible words:")
for candidate in candidate_paths(start, goal, R):
    print(f"  {candidate.word}: {candidate.length:.4f}")

# Evaluate path at a few distances
print("\nPoses along the path:")
for s in [0.0, 0.25, 0.5, 0.75, 1.0]:
    p = path.pose_at(s * path.length)
    print(f"s={s:.2f}: x={p.x:.4f}, y={p.y:.4f}, psi={p.heading:.4f} rad")

# Vectorized evaluation through CasADi
samples = sample_array(path, step_size=0.1)
print(f"\nSampled {samples.shape[0]} poses, last: {samples[-1]}")
