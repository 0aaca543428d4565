import asyncio, traceback
from contextlib import asynccontextmanager

import psutil
import socket
from typing import List

from concurrent.futures import ThreadPoolExecutor

from fastapi import FastAPI, Request
from fastapi import status, HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
import uvicorn

from helpers.config import load_s3_config
from helpers.storage import build_s3_client

# CONSTANTS
PORT = 3939
DEBUG = False
SONOLUS_VERSION = "1.0.2"


def get_local_ipv4() -> List[str]:
    addresses = []

    for iface_addrs in psutil.net_if_addrs().values():
        for addr in iface_addrs:
            if addr.family == socket.AF_INET and not addr.address.startswith("127."):
                addresses.append(addr.address)

    return addresses if addresses else ["localhost"]


class SonolusFastAPI(FastAPI):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.debug = kwargs["debug"]

        self.executor = ThreadPoolExecutor(max_workers=16)

        self.s3_config = load_s3_config()
        # boto3 client, created in lifespan
        self.s3 = None

        self.exception_handlers.setdefault(HTTPException, self.http_exception_handler)

    async def run_blocking(self, func, *args, **kwargs):
        return await asyncio.get_running_loop().run_in_executor(
            self.executor, lambda: func(*args, **kwargs)
        )

    async def http_exception_handler(self, request: Request, exc: HTTPException):
        if exc.status_code < 500:
            return JSONResponse(
                content={"message": exc.detail}, status_code=exc.status_code
            )
        else:
            print(
                "-" * 100
                + f"\nerror 500: {request.method} {str(request.url)}\n"
                + "-" * 100
            )
            return JSONResponse(content={}, status_code=exc.status_code)


class SonolusMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["Sonolus-Version"] = SONOLUS_VERSION
        return response


@asynccontextmanager
async def lifespan(app: SonolusFastAPI):
    await startup_event(app)
    yield
    app.executor.shutdown(wait=False)


app = SonolusFastAPI(debug=DEBUG, lifespan=lifespan)


@app.middleware("http")
async def no_unhandled_exceptions(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        traceback.print_exc()
        return JSONResponse(
            content={
                "error": "Internal Server Error",
                "code": "internal_server_error",
            },
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


app.add_middleware(SonolusMiddleware)


async def startup_event(app: SonolusFastAPI):
    import routes

    for router in routes.routers:
        app.include_router(router)

    if app.s3 is None:
        app.s3 = build_s3_client(app.s3_config)

    print("OK!")
    ips = get_local_ipv4()
    for ip in ips:
        print(f"Go to server https://open.sonolus.com/{ip}:{PORT}/")


async def start_fastapi():
    config_server = uvicorn.Config(
        app,
        host="0.0.0.0",
        port=PORT,
        workers=1,
        access_log=DEBUG,
        log_level="critical" if not DEBUG else None,
    )
    server = uvicorn.Server(config_server)
    await server.serve()


if __name__ == "__main__":
    raise SystemExit("Please run main.py")
