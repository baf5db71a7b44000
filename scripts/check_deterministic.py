import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from chamber.simulation import initialize, tick

runs = []
for _ in range(2):
    state = initialize(6, 10, seed=99)
    for _ in range(300):
        snap = tick(state, 60.0, False)
    runs.append((snap.positions.tolist(), state.reaction_count))

print("reactions:", runs[0][1], runs[1][1])
print("identical:", runs[0] == runs[1])
