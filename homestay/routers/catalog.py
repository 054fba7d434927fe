from fastapi import APIRouter

from homestay.dependencies import SettingsDep
from homestay.mappers.catalog_query import query_catalog
from homestay.schemas.catalog import CatalogPage, CatalogQueryRequest

router = APIRouter()


@router.post("/catalog/query", response_model=CatalogPage)
async def query(request: CatalogQueryRequest, settings: SettingsDep) -> CatalogPage:
    page_size = request.page_size
    if request.page is not None and page_size is None:
        page_size = settings.catalog_page_size

    return query_catalog(
        request.items,
        request.criteria,
        request.sort,
        page=request.page,
        page_size=page_size,
    )
