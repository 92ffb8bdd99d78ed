# examples/hanging_cloth.py
import logging

from verlet_cloth import Cloth, ClothConfig
from verlet_cloth.core.invariants import kinetic_energy, max_strain
from verlet_cloth.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO)

cloth = Cloth.from_config(ClothConfig(rows=6, cols=6))

for _ in range(200):
    cloth.step()

DebugRenderer(verbose=False).render_cloth(cloth)
print("ticks:", cloth.ticks)
print("kinetic energy:", kinetic_energy(cloth.particles, cloth.config.dt))
print("max strain:", max_strain(cloth.particles, cloth.constraints))
