from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from studio_engines.gallery.models import GalleryImage, GalleryImageCreate, GalleryImageUpdate
from studio_engines.gallery.service import get_gallery_service
from studio_engines.identity.auth import require_admin

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.get("", response_model=List[GalleryImage])
def list_active_images():
    return get_gallery_service().list_images(active_only=True)


@router.get("/all", response_model=List[GalleryImage])
def list_all_images(auth=Depends(require_admin)):
    return get_gallery_service().list_images()


@router.post("", status_code=201, response_model=GalleryImage)
def create_image(payload: GalleryImageCreate, auth=Depends(require_admin)):
    return get_gallery_service().create_image(payload, actor=auth.email)


@router.patch("/{image_id}", response_model=GalleryImage)
def update_image(image_id: str, payload: GalleryImageUpdate, auth=Depends(require_admin)):
    return get_gallery_service().update_image(image_id, payload, actor=auth.email)


@router.delete("/{image_id}")
def delete_image(image_id: str, auth=Depends(require_admin)):
    get_gallery_service().delete_image(image_id, actor=auth.email)
    return {"status": "deleted"}
