# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging

from . import grid2, grid3
from .coord import Vec2, Vec3
from .axisbound import ZeroTo, Interval, LowerBounded, UpperBounded, Unbounded, UNBOUNDED
from .grid import Grid, FixedSize, ValueRead, ValueWrite, RefRead, RefWrite
from .slot import Slot, Cell
from .densegrid import DenseGrid
from .fixedgrid import FixedGrid
from .elevation import SharedGrid, ExclusiveGrid
from .options import AccessOptions, CopyMode, get_options, set_options
from .errors import GridError, OutOfBoundsError, InvalidSubviewError

logging.getLogger(__name__).addHandler(logging.NullHandler())
