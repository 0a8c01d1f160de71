"""
Input/Output Manager (HDF5)
Handles saving and loading parameters together with their tabulated samples.
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import h5py
import numpy as np

from paramtable.config import APP_VERSION
from paramtable.model.parameters import MotionParameters
from paramtable.model.table import SampleTable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _to_native(val):
    # HDF5 attributes come back as numpy scalars or bytes
    if isinstance(val, bytes):
        return val.decode('utf-8')
    if hasattr(val, 'item'):
        return val.item()
    return val


class ArchiveManager:

    @staticmethod
    def save(params: MotionParameters, table: Optional[SampleTable], filepath: PathLike) -> None:
        logger.info(f"Saving archive to: {filepath}")
        try:
            with h5py.File(filepath, "w") as f:
                f.attrs["version"] = APP_VERSION
                f.attrs["created"] = datetime.now().isoformat(timespec="seconds")

                # --- 1. SAVE PARAMETERS ---
                grp_params = f.create_group("parameters")
                grp_params.attrs["v0"] = params.v0
                grp_params.attrs["g"] = params.g
                grp_params.create_dataset("t", data=params.times)

                # --- 2. SAVE TABLE ---
                if table is not None:
                    grp_tab = f.create_group("table")
                    grp_tab.attrs["x_label"] = table.x_label
                    grp_tab.attrs["y_label"] = table.y_label
                    grp_tab.create_dataset("x", data=table.x, compression="gzip")
                    grp_tab.create_dataset("y", data=table.y, compression="gzip")
                    logger.debug(f"Saved {len(table)} table rows.")

            logger.info(f"Archive saved to: {filepath}")

        except Exception as e:
            logger.exception(f"Failed to save archive: {e}")
            raise

    @staticmethod
    def load(filepath: PathLike) -> tuple[MotionParameters, Optional[SampleTable]]:
        logger.info(f"Loading archive from: {filepath}")
        if not h5py.is_hdf5(filepath):
            msg = f"File '{filepath}' is not a valid HDF5 file."
            logger.error(msg)
            raise ValueError(msg)

        try:
            with h5py.File(filepath, "r") as f:
                if "version" in f.attrs:
                    logger.debug(f"Archive written by version {_to_native(f.attrs['version'])}.")

                params = MotionParameters()
                if "parameters" in f:
                    grp_params = f["parameters"]
                    if "v0" in grp_params.attrs:
                        params.v0 = float(grp_params.attrs["v0"])
                    if "g" in grp_params.attrs:
                        params.g = float(grp_params.attrs["g"])
                    if "t" in grp_params:
                        params.t = grp_params["t"][:].tolist()

                table = None
                if "table" in f:
                    grp_tab = f["table"]
                    table = SampleTable(
                        x=np.asarray(grp_tab["x"][:]),
                        y=np.asarray(grp_tab["y"][:]),
                        x_label=_to_native(grp_tab.attrs.get("x_label", "t")),
                        y_label=_to_native(grp_tab.attrs.get("y_label", "y")),
                    )
                    logger.debug(f"Loaded {len(table)} table rows.")

            logger.info(f"Archive loaded from: {filepath}")
            return params, table

        except Exception as e:
            logger.exception(f"Failed to load archive: {e}")
            raise
