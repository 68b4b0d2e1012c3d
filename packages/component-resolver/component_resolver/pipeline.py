"""Host resolution pipeline built on pluggy."""

import logging
from typing import Any, Optional

import pluggy
from returns.maybe import Maybe

from component_resolver.config import ResolverConfig
from component_resolver.filesystem import FileSystem
from component_resolver.hookspecs import ResolverSpecs
from component_resolver.models import Continuation, ResolutionRequest, ResolvedFile, continue_with
from component_resolver.resolver import ComponentResolver

logger = logging.getLogger(__name__)

COMPONENT_STEP_NAME = 'component-resolver'


class ResolutionPipeline:
    """Ordered chain of resolution steps.

    Each registered step implements the ``resolve_request`` hook and either
    returns a match or None to defer. The first match wins.
    """

    def __init__(self, pm: Optional[pluggy.PluginManager] = None) -> None:
        if pm is None:
            pm = pluggy.PluginManager('component_resolver')
            pm.add_hookspecs(ResolverSpecs)
        self._pm = pm

    @property
    def plugin_manager(self) -> pluggy.PluginManager:
        return self._pm

    def register_step(self, step: object, name: Optional[str] = None) -> None:
        """Register a step object implementing ``resolve_request``.

        Note:
            pluggy calls later registrations first.
        """
        self._pm.register(step, name=name)
        logger.debug(f'Registered resolution step: {name or type(step).__name__}')

    def resolve(self, request: ResolutionRequest) -> Maybe[ResolvedFile]:
        """Run the request through all steps and return the first match."""
        return Maybe.from_optional(self._pm.hook.resolve_request(request=request))

    def dispatch(self, request: ResolutionRequest, continuation: Continuation) -> Any:
        """Callback form of resolve(): invokes exactly one continuation."""
        return continue_with(self.resolve(request), continuation)


def build_pipeline(
    config: ResolverConfig,
    filesystem: Optional[FileSystem] = None,
    pipeline: Optional[ResolutionPipeline] = None,
) -> ResolutionPipeline:
    """Create a component resolver from config and register it with a pipeline.

    Args:
        config: Validated resolver configuration.
        filesystem: Optional stat capability. Local filesystem if not provided.
        pipeline: Optional existing pipeline. Created if not provided.

    Returns:
        The pipeline with the component resolver registered.
    """
    if pipeline is None:
        pipeline = ResolutionPipeline()

    resolver = ComponentResolver(
        extensions=config.extensions,
        filesystem=filesystem,
        vendor_dir=config.vendor_dir,
    )
    pipeline.register_step(resolver, name=COMPONENT_STEP_NAME)
    return pipeline
