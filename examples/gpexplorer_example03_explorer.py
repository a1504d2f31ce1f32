"""
Interactive exploration of a 1D GP posterior

Opens the explorer window on a small training set. Left click on an
empty spot to add an observation, left click on an observation to
remove it, and move the sliders to change the length scale, the
amplitude sigma and the noise variance of the RBF covariance.

The same window is opened by the `gpexplorer` command, which in
addition restores and saves the session in ~/.gpexplorer.json.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
"""

from gpexplorer.misc import Session
from gpexplorer.plot import Explorer


def main():
    session = Session(
        x=[0.5, 2.0, 3.0, 7.5],
        y=[0.0, 1.2, 0.8, -1.0],
        length_scale=1.2,
        sigma=1.0,
        noise_sigma=0.05,
    )
    explorer = Explorer(session, band="std", figsize=(8, 6))
    explorer.show()

    return explorer


if __name__ == "__main__":
    main()
