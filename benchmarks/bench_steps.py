"""
Microbenchmark: time per step vs cloth size and solver passes.
Run:
  python benchmarks/bench_steps.py
"""
import time

from verlet_cloth import Cloth, ClothConfig
from verlet_cloth.profiler import Profiler


def run(n: int, iters: int, steps: int = 100):
    prof = Profiler()
    cloth = Cloth.from_config(ClothConfig(rows=n, cols=n, solver_iters=iters), profiler=prof)

    # warmup
    for _ in range(10):
        cloth.step()
    prof.reset()

    t0 = time.perf_counter()
    for _ in range(steps):
        cloth.step()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 20, 40]:
        for iters in [1, 5, 20]:
            per_step, summary = run(n, iters)
            print(f"{n:3d}x{n:<3d} iters={iters:2d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
            for k in ["integrate", "relax"]:
                print(" ", k, summary[k])
        print()
