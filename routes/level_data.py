from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from helpers.logs import print_exc
from helpers.sus_data import (
    INTERNAL_SERVER_ERROR,
    SusDataError,
    export_level_data,
    get_sus_data,
)

router = APIRouter()


def _error_response(err: SusDataError) -> JSONResponse:
    return JSONResponse(content=err.body, status_code=err.status_code)


@router.get("/sonolus/levels/{hash}/data")
async def main(request: Request, hash: str):
    result = await get_sus_data(
        request.app.s3,
        hash,
        bucket=request.app.s3_config.bucket,
        run_blocking=request.app.run_blocking,
    )
    if isinstance(result, SusDataError):
        return _error_response(result)

    try:
        data = await request.app.run_blocking(export_level_data, result)
    except Exception as e:
        print_exc(e)
        return _error_response(INTERNAL_SERVER_ERROR)
    return Response(content=data, media_type="application/octet-stream")
