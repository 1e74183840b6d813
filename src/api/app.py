from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    # The message is the generic, action-specific one; the cause was logged by the use case
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="propdesk", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        audit,
        cache,
        document,
        health_check,
        lease,
        maintenance,
        notification,
        project,
        property,
        report,
        search,
        task,
        tax,
        tenant,
        unit,
        user,
        utility,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(property.router, tags=["Property"])
    app.include_router(unit.router, tags=["Unit"])
    app.include_router(tenant.router, tags=["Tenant"])
    app.include_router(lease.router, tags=["Lease"])
    app.include_router(tax.router, tags=["Tax"])
    app.include_router(utility.router, tags=["Utility"])
    app.include_router(maintenance.router, tags=["Maintenance"])
    app.include_router(document.router, tags=["Document"])
    app.include_router(project.router, tags=["Project"])
    app.include_router(task.router, tags=["Task"])
    app.include_router(notification.router, tags=["Notification"])
    app.include_router(audit.router, tags=["Audit"])
    app.include_router(report.router, tags=["Report"])
    app.include_router(search.router, tags=["Search"])
    app.include_router(user.router, tags=["User"])
    app.include_router(cache.router, tags=["Cache"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
