"""Gallery, package and client logo endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends

from studio_site.api.dependencies import get_container, require_admin
from studio_site.api.schemas import (
    ClientLogoCreate,
    ClientLogoUpdate,
    GalleryItemCreate,
    GalleryItemUpdate,
    PackageCreate,
    PackageUpdate,
)
from studio_site.api.serializers import (
    serialize_gallery_item,
    serialize_logo,
    serialize_package,
)
from studio_site.containers import AppContainer

gallery_router = APIRouter(prefix="/api/gallery", tags=["gallery"])
packages_router = APIRouter(prefix="/api/packages", tags=["packages"])
logos_router = APIRouter(prefix="/api/client-logos", tags=["client-logos"])


@gallery_router.get("")
async def public_gallery(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return the published gallery items shown on the home page."""
    items = container.gallery_service.list_public()
    return [serialize_gallery_item(item) for item in items]


@gallery_router.get("/admin", dependencies=[Depends(require_admin)])
async def all_gallery_items(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    items = container.gallery_service.list_all()
    return [serialize_gallery_item(item) for item in items]


@gallery_router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_gallery_item(
    body: GalleryItemCreate, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    item = container.gallery_service.create(body.model_dump())
    return serialize_gallery_item(item)


@gallery_router.put("/{item_id}", dependencies=[Depends(require_admin)])
async def update_gallery_item(
    item_id: UUID,
    body: GalleryItemUpdate,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    item = container.gallery_service.update(
        item_id, body.model_dump(exclude_unset=True)
    )
    return serialize_gallery_item(item)


@gallery_router.delete("/{item_id}", dependencies=[Depends(require_admin)])
async def delete_gallery_item(
    item_id: UUID, container: AppContainer = Depends(get_container)
) -> dict[str, str]:
    container.gallery_service.delete(item_id)
    return {"message": "Gallery item deleted successfully"}


@packages_router.get("")
async def public_packages(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return published packages."""
    packages = container.package_service.list_public()
    return [serialize_package(package) for package in packages]


@packages_router.get("/admin", dependencies=[Depends(require_admin)])
async def all_packages(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    packages = container.package_service.list_all()
    return [serialize_package(package) for package in packages]


@packages_router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_package(
    body: PackageCreate, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    package = container.package_service.create(body.model_dump())
    return serialize_package(package)


@packages_router.put("/{package_id}", dependencies=[Depends(require_admin)])
async def update_package(
    package_id: UUID,
    body: PackageUpdate,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    package = container.package_service.update(
        package_id, body.model_dump(exclude_unset=True)
    )
    return serialize_package(package)


@packages_router.delete("/{package_id}", dependencies=[Depends(require_admin)])
async def delete_package(
    package_id: UUID, container: AppContainer = Depends(get_container)
) -> dict[str, str]:
    container.package_service.delete(package_id)
    return {"message": "Package deleted successfully"}


@logos_router.get("")
async def public_logos(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return client logos for the home page strip."""
    return [serialize_logo(logo) for logo in container.client_logo_service.list_logos()]


@logos_router.get("/admin", dependencies=[Depends(require_admin)])
async def all_logos(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    return [serialize_logo(logo) for logo in container.client_logo_service.list_logos()]


@logos_router.post("", status_code=201, dependencies=[Depends(require_admin)])
async def create_logo(
    body: ClientLogoCreate, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    logo = container.client_logo_service.create(body.model_dump())
    return serialize_logo(logo)


@logos_router.put("/{logo_id}", dependencies=[Depends(require_admin)])
async def update_logo(
    logo_id: UUID,
    body: ClientLogoUpdate,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    logo = container.client_logo_service.update(
        logo_id, body.model_dump(exclude_unset=True)
    )
    return serialize_logo(logo)


@logos_router.delete("/{logo_id}", dependencies=[Depends(require_admin)])
async def delete_logo(
    logo_id: UUID, container: AppContainer = Depends(get_container)
) -> dict[str, str]:
    container.client_logo_service.delete(logo_id)
    return {"message": "Client logo deleted successfully"}
