from app.core.routers.api_router import APIRouter


def _paths(router):
    return [(route.path, route.include_in_schema) for route in router.routes]


def test_router_registers_trailing_slash_variant():
    router = APIRouter(prefix="/chains")

    @router.get("")
    async def list_chains():
        return {}

    assert _paths(router) == [("/chains", True), ("/chains/", False)]


def test_including_router_does_not_duplicate_routes():
    child = APIRouter(prefix="/chains")

    @child.get("")
    async def list_chains():
        return {}

    parent = APIRouter()
    parent.include_router(child)

    assert _paths(parent) == [("/chains", True), ("/chains/", False)]
