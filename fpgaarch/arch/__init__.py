# -*- encoding: ascii -*-

from .common import *
from .model import *
from .port import *
from .timing import *
from .pbtype import *
from .tile import *
from .layout import *
from .device import *
from .routing import *
from .architecture import *

from . import common, model, port, timing, pbtype, tile, layout, device, routing, architecture

__all__ = (common.__all__ + model.__all__ + port.__all__ + timing.__all__ + pbtype.__all__ + tile.__all__ +
        layout.__all__ + device.__all__ + routing.__all__ + architecture.__all__)
