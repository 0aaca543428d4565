import traceback


def print_exc(e: BaseException) -> None:
    print("".join(traceback.format_exception(e, e, e.__traceback__)))
