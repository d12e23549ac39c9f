from fastapi import Request

from weaviate_console.db.service import ConsoleService


def get_console_service(request: Request) -> ConsoleService:
    """Console service created by the application lifespan"""
    return request.app.state.console_service
