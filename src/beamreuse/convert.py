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

# -----------------------
# linear <-> dB
# -----------------------
def lin2db(x):
    """Convert a linear ratio to dB."""
    with np.errstate(divide='ignore'):
        return 10.0 * np.log10(x)

def db2lin(x):
    """Convert dB to a linear ratio."""
    return 10.0 ** (np.asarray(x) / 10.0)

# -----------------------
# frequency <-> wavelength
# -----------------------
def f2lambda(f_hz):
    """Wavelength in m from frequency in Hz."""
    return speed_of_light / np.asarray(f_hz, dtype=float)

def lambda2f(lam_m):
    """Frequency in Hz from wavelength in m."""
    return speed_of_light / np.asarray(lam_m, dtype=float)
