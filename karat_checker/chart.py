from io import BytesIO
import numpy as np
import matplotlib.pyplot as plt

from .constants import MAX_DENSITY, MIN_DENSITY
from .data import REFERENCE_TABLE

def _hex_to_rgb(color: str):
    c = color.lstrip("#")
    return tuple(int(c[i:i+2], 16) / 255.0 for i in (0, 2, 4))

def render_density_chart(result=None, table=REFERENCE_TABLE):
    labels = [b.karat_label for b in table]
    lo = np.array([b.min_density for b in table], dtype=float)
    hi = np.array([b.max_density for b in table], dtype=float)
    y = np.arange(len(table))

    colors = [(0.85, 0.75, 0.45)] * len(table)
    if result is not None and result.matched_band is not None:
        idx = list(table).index(result.matched_band)
        colors[idx] = _hex_to_rgb(result.category_color)

    fig = plt.figure(figsize=(6.0, 5.2))
    ax = fig.add_subplot(111)
    ax.barh(y, hi - lo, left=lo, color=colors, edgecolor="white", height=0.85)
    ax.set_yticks(y)
    ax.set_yticklabels(labels)
    ax.invert_yaxis()
    ax.set_xlabel("Density (g/cm³)")
    ax.set_ylabel("Karat")

    x_lo, x_hi = MIN_DENSITY - 0.5, MAX_DENSITY + 0.5
    if result is not None:
        d = float(result.density)
        ax.axvline(d, color="black", linestyle="--", linewidth=1.2, label=f"Measured {d:.2f} g/cm³")
        ax.legend(loc="lower right", fontsize=8)
        x_lo, x_hi = min(x_lo, d - 0.5), max(x_hi, d + 0.5)
    ax.set_xlim(x_lo, x_hi)
    ax.set_title("Karat density bands")
    fig.tight_layout()
    return fig

def figure_png_bytes(fig) -> bytes:
    buf = BytesIO()
    fig.savefig(buf, format="png", dpi=120)
    plt.close(fig)
    return buf.getvalue()
