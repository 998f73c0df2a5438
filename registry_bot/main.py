"""Main FastAPI application"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.v1.routers import health_router, webhook_router
from .core.config import logger, settings
from .core.dependencies import build_runtime
from .infrastructure.persistence.database import close_db, init_db


def _log_loop_exit(task: asyncio.Task) -> None:
    if task.cancelled():
        logger.warning("Update loop task was cancelled")
    elif task.exception() is not None:
        logger.error("Update loop crashed", exc_info=task.exception())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Registry Bot...")
    logger.info(f"Version: {settings.version}")
    logger.info(f"Delivery mode: {settings.delivery_mode}")

    runtime = None
    try:
        runtime = build_runtime(settings)

        await init_db()
        logger.info("✓ Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        if runtime is not None:
            await runtime.provider.close()
            await runtime.gateway.close()
        await close_db()
        raise

    # Шлюз подготавливается при первой подписке на обновления (см. receive_updates)

    stop_event = asyncio.Event()
    loop_task = asyncio.create_task(runtime.update_loop.run(stop_event), name="update-loop")
    loop_task.add_done_callback(_log_loop_exit)
    app.state.runtime = runtime

    yield

    # Shutdown logic
    logger.info("Shutting down Registry Bot...")
    stop_event.set()
    await asyncio.gather(loop_task, return_exceptions=True)
    await runtime.store.close()
    await runtime.provider.close()
    await close_db()
    app.state.runtime = None


app = FastAPI(
    title="Registry Bot",
    description="Telegram bot for looking up Russian legal entities by tax ID",
    version=settings.version,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(webhook_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "registry_bot.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
