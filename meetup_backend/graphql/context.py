"""GraphQL context for dependency injection.

Resolvers reach the resolver root and the request's cancellation token
through ``info.context``.
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from meetup_backend.domain.shared.cancellation import CancellationToken
from meetup_backend.graphql.resolver import Resolver


class GraphQLContext(BaseContext):
    """GraphQL context for one request.

    Attributes:
        resolver: Process-scoped resolver root
        token: Cancellation token valid for the whole request
        request: FastAPI request (None outside HTTP, e.g. in tests)
    """

    def __init__(
        self,
        resolver: Resolver,
        token: CancellationToken,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.resolver = resolver
        self.token = token
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name, None if missing.

        Example:
            >>> resolver = info.context.get("resolver")
        """
        return getattr(self, key, None)


def create_context(
    resolver: Resolver,
    timeout_s: Optional[float] = None,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with a fresh cancellation token.

    Args:
        resolver: Resolver root
        timeout_s: Request deadline in seconds (None/0 = no deadline)
        request: FastAPI request; its disconnect state cancels the token

    Returns:
        GraphQLContext for one request
    """
    token = CancellationToken(
        timeout_s=timeout_s,
        disconnect_probe=request.is_disconnected if request is not None else None,
    )
    return GraphQLContext(resolver=resolver, token=token, request=request)
