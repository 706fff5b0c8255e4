lic_ = """
   Copyright 2025 Richard Tjörnhammar

   Licensed under the Apache License, Version 2.0 (the "License");
   you may not use this file except in compliance with the License.
   You may obtain a copy of the License at

       http://www.apache.org/licenses/LICENSE-2.0

   Unless required by applicable law or agreed to in writing, software
   distributed under the License is distributed on an "AS IS" BASIS,
   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
   See the License for the specific language governing permissions and
   limitations under the License.
"""
from .init import *
import matplotlib.pyplot as plt
# -----------------------
# plotting & saving helpers
# -----------------------
def plot_beam_colours(beam_centers, colours, filename: str, title: str = "", annotate: bool = True):
    centers = np.asarray(beam_centers, dtype=float).reshape(-1, 2)
    colours = np.asarray(colours, dtype=int)
    fig = plt.figure(figsize=(8,8))
    ax = fig.add_subplot(111)
    sc = ax.scatter(centers[:,0], centers[:,1], c=colours, cmap='tab20', s=60, edgecolors='k')
    if annotate:
        for (u, v), c in zip(centers, colours):
            ax.annotate(str(c), (u, v), ha='center', va='center', fontsize=6)
    fig.colorbar(sc, ax=ax, label='colour')
    ax.set_title(title)
    ax.set_xlabel('U'); ax.set_ylabel('V')
    ax.set_aspect('equal')
    fig.tight_layout()
    fig.savefig(filename, dpi=200)
    plt.close(fig)
    return filename
