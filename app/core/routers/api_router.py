from typing import Any, Callable, Iterable, Optional
from fastapi import APIRouter as FastAPIRouter


class APIRouter(FastAPIRouter):
    """
    APIRouter that also answers on the trailing-slash variant of each path
    instead of redirecting to it.
    """

    def _has_route(self, full_path: str, methods: Optional[Iterable[str]]) -> bool:
        wanted = {m.upper() for m in (methods or ["GET"])}
        for route in self.routes:
            if getattr(route, "path", None) != full_path:
                continue
            if wanted & set(getattr(route, "methods", None) or ()):
                return True
        return False

    def add_api_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        include_in_schema: bool = True,
        **kwargs: Any,
    ) -> None:
        methods = kwargs.get("methods")
        if self._has_route(self.prefix + path, methods):
            return
        super().add_api_route(
            path, endpoint, include_in_schema=include_in_schema, **kwargs
        )

        alternate = path[:-1] if path.endswith("/") else path + "/"
        if not (self.prefix + alternate) or self._has_route(self.prefix + alternate, methods):
            return
        super().add_api_route(alternate, endpoint, include_in_schema=False, **kwargs)
