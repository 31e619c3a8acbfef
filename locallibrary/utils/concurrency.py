from concurrent.futures import ThreadPoolExecutor

from flask import current_app, has_app_context


def fetch_concurrently(*calls):
    """
    Run independent read calls in parallel and return their results in call order.
    - Each call gets its own Flask app context (so its own db session).
    - The first exception raised by a call propagates to the caller.
    """
    if not calls:
        return ()

    app = current_app._get_current_object() if has_app_context() else None
    workers = len(calls)
    if app is not None:
        workers = max(1, min(workers, app.config.get("CATALOG_FETCH_WORKERS", workers)))

    def _run(call):
        if app is None:
            return call()
        with app.app_context():
            return call()

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="catalog-fetch") as pool:
        futures = [pool.submit(_run, call) for call in calls]
        return tuple(f.result() for f in futures)
