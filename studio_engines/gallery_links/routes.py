from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from studio_engines.gallery_links.models import GalleryLink, GalleryLinkCreate, GalleryLinkUpdate
from studio_engines.gallery_links.service import get_gallery_link_service
from studio_engines.identity.auth import require_admin

router = APIRouter(prefix="/gallery-links", tags=["gallery"])


@router.get("", response_model=List[GalleryLink])
def list_active_links():
    return get_gallery_link_service().list_links(active_only=True)


@router.get("/all", response_model=List[GalleryLink])
def list_all_links(auth=Depends(require_admin)):
    return get_gallery_link_service().list_links()


@router.post("", status_code=201, response_model=GalleryLink)
def create_link(payload: GalleryLinkCreate, auth=Depends(require_admin)):
    return get_gallery_link_service().create_link(payload, actor=auth.email)


@router.patch("/{link_id}", response_model=GalleryLink)
def update_link(link_id: str, payload: GalleryLinkUpdate, auth=Depends(require_admin)):
    return get_gallery_link_service().update_link(link_id, payload, actor=auth.email)


@router.delete("/{link_id}")
def delete_link(link_id: str, auth=Depends(require_admin)):
    get_gallery_link_service().delete_link(link_id, actor=auth.email)
    return {"status": "deleted"}
