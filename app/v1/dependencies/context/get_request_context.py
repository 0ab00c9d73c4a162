from fastapi import Request
from app.lib.request_context import ChainRequestContext


def get_request_context(request: Request) -> ChainRequestContext:
    context = ChainRequestContext()
    request.state.request_id = context.request_id
    context.info("Processing CCIP chains request", url=str(request.url))
    return context
