# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of gridview."""

from .coord import Vec2, Vec3, Coord
from .axisbound import AxisBound, FiniteBound, ZeroTo, Interval, LowerBounded, UpperBounded, Unbounded
from .grid import Grid, FixedSize, ValueRead, ValueWrite, RefRead, RefWrite
from .slot import Slot, ItemSlot, Cell

from .arraygrid import ArrayGrid
from .densegrid import DenseGrid
from .fixedgrid import FixedGrid
from .functiongrid import FunctionGrid, RefFunctionGrid, MutFunctionGrid, ReaderWriterGrid

from .view import View
from .map import Map, EnumerateMap
from .flatten import Flatten
from .neworigin import NewOrigin
from .oobhandler import OobHandler
from .gridslice import Slice, SubviewResult
from .wrapping import Wrapping
from .elevation import SharedGrid, ExclusiveGrid

from .options import AccessOptions, CopyMode
from .errors import GridError, OutOfBoundsError, InvalidSubviewError
