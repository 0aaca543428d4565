from . import homepage, level_data

routers = [
    homepage.router,
    level_data.router,
]
