from fastapi import APIRouter


def register_routers(router: APIRouter) -> None:
    from hostprofile.api.modules.hardware.routes import router as hardware_router

    router.include_router(hardware_router, prefix="/hardware", tags=["Hardware"])
