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
import pandas as pd

logger = logging.getLogger(__name__)

def colours_frame(beam_centers, colours) -> pd.DataFrame:
    """
    One row per beam with columns:
        beam, u, v, colour
    """
    centers = np.asarray(beam_centers, dtype=float).reshape(-1, 2)
    colours = np.asarray(colours, dtype=int)
    if colours.shape != (centers.shape[0],):
        raise ValueError(f"Got {colours.size} colours for {centers.shape[0]} beams")
    return pd.DataFrame({
        "beam": np.arange(centers.shape[0]),
        "u": centers[:, 0],
        "v": centers[:, 1],
        "colour": colours,
    })

def save_colours_csv(beam_centers, colours, filename: str) -> pd.DataFrame:
    df = colours_frame(beam_centers, colours)
    df.to_csv(filename, index=False)
    logger.info("Wrote %d beam colours to %s", len(df), filename)
    return df

def load_beam_centers(filepath: str, u_col: str = "u", v_col: str = "v") -> np.ndarray:
    desc_ = """
    Read beam centers from a CSV file with (at least) a u and a v column.
    Returns an (n,2) float array in file order.
    """
    df = pd.read_csv(filepath)
    missing = [c for c in (u_col, v_col) if c not in df.columns]
    if missing:
        raise KeyError(f"Columns {missing} not found in {filepath}, available: {list(df.columns)}")
    return df[[u_col, v_col]].to_numpy(dtype=float)
