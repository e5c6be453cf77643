"""アベンジャーAPIのルーター定義."""

from typing import Annotated

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Path,
    Request,
    Response,
    status,
)

from avengers.avenger.protocol import AvengerRepository
from avengers.avenger.repository import get_avenger_repository
from avengers.avenger.schema import AvengerRequest, AvengerResponse

# BIGINT主キーの範囲外はストレージに到達する前に422とする
MAX_AVENGER_ID = 2**63 - 1

router = APIRouter(prefix="/v1/api/avenger", tags=["avengers"])

Repository = Annotated[AvengerRepository, Depends(get_avenger_repository)]
AvengerId = Annotated[int, Path(ge=1, le=MAX_AVENGER_ID)]


@router.get("", response_model=list[AvengerResponse])
async def get_avengers(repo: Repository) -> list[AvengerResponse]:
    """登録済みのアベンジャー一覧を返す."""
    avengers = await repo.get_avengers()
    return [AvengerResponse.model_validate(a) for a in avengers]


@router.get("/{avenger_id}/detail", response_model=AvengerResponse)
async def get_avenger_detail(
    avenger_id: AvengerId,
    repo: Repository,
) -> AvengerResponse:
    """指定IDのアベンジャーを返す(存在しない場合は404)."""
    avenger = await repo.get_detail(avenger_id)
    if avenger is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"avenger id={avenger_id} not found",
        )
    return AvengerResponse.model_validate(avenger)


@router.post(
    "",
    response_model=AvengerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_avenger(
    body: AvengerRequest,
    request: Request,
    response: Response,
    repo: Repository,
) -> AvengerResponse:
    """アベンジャーを登録し、詳細取得URLをLocationヘッダに付けて返す."""
    avenger = await repo.create(body.to_avenger())
    response.headers["Location"] = str(
        request.url_for("get_avenger_detail", avenger_id=avenger.id)
    )
    return AvengerResponse.model_validate(avenger)


@router.put("/{avenger_id}", response_model=AvengerResponse)
async def update_avenger(
    avenger_id: AvengerId,
    body: AvengerRequest,
    repo: Repository,
) -> AvengerResponse:
    """指定IDのアベンジャーを全項目更新する.

    存在しないIDの場合はAvengerNotFoundErrorが送出され、404となる。
    """
    avenger = await repo.update(body.to_identified_avenger(avenger_id))
    return AvengerResponse.model_validate(avenger)


@router.delete("/{avenger_id}", status_code=status.HTTP_202_ACCEPTED)
async def delete_avenger(avenger_id: AvengerId, repo: Repository) -> Response:
    """指定IDのアベンジャーを削除する(存在しなくても202)."""
    await repo.delete(avenger_id)
    return Response(status_code=status.HTTP_202_ACCEPTED)
