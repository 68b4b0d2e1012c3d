"""Pluggy hook specifications for the resolution pipeline."""

from typing import Optional

import pluggy

from component_resolver.models import ResolutionRequest, ResolvedFile

hookspec = pluggy.HookspecMarker('component_resolver')
hookimpl = pluggy.HookimplMarker('component_resolver')


class ResolverSpecs:
    """Hook specifications for resolution steps."""

    @hookspec(firstresult=True)
    def resolve_request(self, request: ResolutionRequest) -> Optional[ResolvedFile]:
        """Return a match for the request, or None to defer to the next step."""
