from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/sonolus/info")
async def main(request: Request):
    desc = "SUS level data server - fetches charts from object storage by hash"

    data = {
        "title": "SUS Level Data",
        "description": desc,
        "buttons": [{"type": "level"}],
        "configuration": {"options": []},
    }
    return data
