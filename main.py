import asyncio

from app import start_fastapi

if __name__ == "__main__":
    asyncio.run(start_fastapi())
