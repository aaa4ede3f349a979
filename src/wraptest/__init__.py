"""WRAPTEST

Run shared setup and teardown code around every test in a module.
A module names a wrapper (and/or an async wrapper); each test function is
rewritten at the source level so that its body runs inside that wrapper.
"""

from wraptest.domain.arguments import parse_wrap_args
from wraptest.domain.model import WrapConfig
from wraptest.markers import test
from wraptest.service_layer.directive import transform_annotated
from wraptest.service_layer.transform import transform

__all__ = [
    "__version__",
    "WrapConfig",
    "parse_wrap_args",
    "test",
    "transform",
    "transform_annotated",
]
__version__ = "0.1.0"
