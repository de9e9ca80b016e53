import re
from dataclasses import dataclass
from typing import List, Optional, Tuple
import pandas as pd

from .constants import KARAT_TABLE

_KARAT_LABEL_RE = re.compile(r"^(\d+(\.\d+)?)K$")

def parse_karat_label(label: str) -> Optional[float]:
    """'20K' -> 20.0; anything that is not a karat label -> None."""
    m = _KARAT_LABEL_RE.match(str(label).strip().upper())
    if not m:
        return None
    return float(m.group(1))

@dataclass(frozen=True)
class KaratBand:
    karat_label: str
    percent: float
    min_density: float
    max_density: float

    @property
    def karat(self) -> Optional[float]:
        return parse_karat_label(self.karat_label)

    @property
    def density_range_label(self) -> str:
        return f"{self.min_density:.2f} - {self.max_density:.2f} g/cm³"

    def contains(self, density: float) -> bool:
        return self.min_density <= density <= self.max_density

# Read-only, descending by karat
REFERENCE_TABLE: Tuple[KaratBand, ...] = tuple(KaratBand(*row) for row in KARAT_TABLE)

def _band_row(band: KaratBand) -> dict:
    return {
        "Karat": band.karat_label,
        "Purity (%)": float(band.percent),
        "Min density (g/cm³)": float(band.min_density),
        "Max density (g/cm³)": float(band.max_density),
    }

def reference_frame(bands=None) -> pd.DataFrame:
    rows = [_band_row(b) for b in (REFERENCE_TABLE if bands is None else bands)]
    return pd.DataFrame(rows, columns=["Karat", "Purity (%)", "Min density (g/cm³)", "Max density (g/cm³)"])

def search_table(query: Optional[str]) -> List[KaratBand]:
    """Bands whose label, percent or 'min max' density text contains the query."""
    q = (query or "").strip().lower()
    if not q:
        return list(REFERENCE_TABLE)
    hits = []
    for band in REFERENCE_TABLE:
        if (q in band.karat_label.lower()
                or q in f"{band.percent:g}"
                or q in f"{band.min_density:g} {band.max_density:g}"):
            hits.append(band)
    return hits
