"""
Runtime counterpart of a derive macro.

Generates the nullable companion of a class and materializes it, so that::

    @nullable
    @dataclass
    class Point:
        x: int
        y: str

makes ``NullablePoint`` available next to ``Point``.
"""

import inspect
import sys
from typing import Any, Dict, Optional

from .codegen.core.config import NullableConfig
from .codegen.core.schema import GeneratedArtifact
from .codegen.frontends.python_class import from_class
from .codegen.orchestrator import generate
from .logging_config import get_logger

logger = get_logger(__name__)


def _type_namespace(artifact: GeneratedArtifact) -> Dict[str, Any]:
    """Names needed by default expressions, taken from resolved field types."""
    namespace = {}
    for spec in artifact.struct.fields:
        runtime = spec.type.runtime
        origin = spec.type.origin
        if inspect.isclass(runtime) and origin and "." not in origin:
            namespace[origin] = runtime
    return namespace


def load_artifact(
    artifact: GeneratedArtifact, namespace: Optional[Dict[str, Any]] = None
) -> type:
    """
    Execute an artifact's source and return the generated class.

    Args:
        artifact: Output of the generator
        namespace: Globals the generated code may refer to; copied, not modified

    Returns:
        The generated class
    """
    scope: Dict[str, Any] = {"__name__": "nullable_struct.generated"}
    scope.update(namespace or {})
    scope.update(_type_namespace(artifact))

    code = compile(artifact.source, f"<nullable {artifact.wrapper_name}>", "exec")
    exec(code, scope)

    generated = scope[artifact.wrapper_name]
    generated.__nullable_source__ = artifact.source
    return generated


def build_nullable(cls: type, config: Optional[NullableConfig] = None) -> type:
    """
    Generate and load the nullable companion of ``cls`` without publishing it.

    Raises:
        NullableError: If generation fails
    """
    artifact = generate(from_class(cls), config)

    module = sys.modules.get(cls.__module__)
    namespace = dict(vars(module)) if module is not None else {}
    namespace[cls.__name__] = cls

    return load_artifact(artifact, namespace)


def nullable(cls=None, *, config: Optional[NullableConfig] = None, publish: bool = True):
    """
    Class decorator generating a nullable companion class.

    The companion is attached as ``cls.__nullable__`` and, when ``publish``
    is true, bound in the defining module under its generated name. The
    decorated class itself is returned unchanged.

    Args:
        cls: Class to decorate
        config: Generator configuration
        publish: Bind the companion in the defining module

    Returns:
        The original class
    """

    def wrap(target: type) -> type:
        companion = build_nullable(target, config)
        target.__nullable__ = companion

        module = sys.modules.get(target.__module__)
        if publish and module is not None:
            existing = getattr(module, companion.__name__, None)
            if existing is not None and getattr(existing, "__nullable_source__", None) is None:
                logger.warning(
                    "Replacing %s.%s with generated class",
                    module.__name__,
                    companion.__name__,
                )
            setattr(module, companion.__name__, companion)

        logger.debug("Derived %s from %s", companion.__name__, target.__qualname__)
        return target

    if cls is None:
        return wrap
    return wrap(cls)
