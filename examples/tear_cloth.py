# examples/tear_cloth.py
# Tears a horizontal cut across the middle of the cloth, as a mouse drag would.
import logging

import numpy as np

from verlet_cloth import Cloth, ClothConfig
from verlet_cloth.core.invariants import active_count
from verlet_cloth.renderer import BufferedRenderer

logging.basicConfig(level=logging.DEBUG)

cfg = ClothConfig(rows=12, cols=12)
cloth = Cloth.from_config(cfg)
renderer = BufferedRenderer()

ox, oy = cfg.origin
cut_y = oy + 5.5 * cfg.spacing

for _ in range(30):
    cloth.step()

for x in np.arange(ox, ox + cfg.cols * cfg.spacing, cfg.spacing / 2):
    cloth.tear((float(x), cut_y))
    cloth.step()
    renderer.render_cloth(cloth)

for _ in range(100):
    cloth.step()
    renderer.render_cloth(cloth)

print("links left:", active_count(cloth.constraints), "of", len(cloth.constraints))
print("frames recorded:", len(renderer.frames))
print("lowest particle y:", cloth.positions()[:, 1].max())
