"""Process entry point: config check, gateway and health server, signal shutdown."""

import asyncio
import signal
import sys
from typing import Optional

from discord_relay.config import ConfigError, RelayConfig
from discord_relay.context import RelayContext, RelayState, build_context

SHUTDOWN_SIGNALS = (signal.SIGTERM, signal.SIGINT)
_WIND_DOWN_SECONDS = 5.0


def _log(msg: str):
    print(msg, file=sys.stderr)


async def shutdown(ctx: RelayContext, signame: Optional[str] = None) -> None:
    """Close the gateway and stop the health server. In-flight webhook sends are abandoned."""
    if not ctx.transition(RelayState.SHUTTING_DOWN):
        return
    if signame:
        _log(f"{signame} received, logging out…")
    if not ctx.gateway.is_closed():
        try:
            await ctx.gateway.close()
        except Exception as e:
            _log(f"Gateway close failed: {e!r}")
    ctx.health.stop()
    ctx.stopped.set()


def install_signal_handlers(ctx: RelayContext, loop: asyncio.AbstractEventLoop) -> None:
    for sig in SHUTDOWN_SIGNALS:
        def _on_signal(sig=sig):
            loop.create_task(shutdown(ctx, sig.name))

        try:
            loop.add_signal_handler(sig, _on_signal)
        except NotImplementedError:
            # Windows event loops
            signal.signal(sig, lambda signum, frame, cb=_on_signal: loop.call_soon_threadsafe(cb))


def _task_error(task: asyncio.Task) -> Optional[BaseException]:
    if task.cancelled():
        return None
    return task.exception()


async def run(ctx: RelayContext) -> int:
    """Run until a shutdown signal or a fatal gateway/health failure. Returns the exit status."""
    loop = asyncio.get_running_loop()
    install_signal_handlers(ctx, loop)

    health_task = loop.create_task(ctx.health.serve())
    gateway_task = loop.create_task(ctx.gateway.start(ctx.config.discord_token))
    stop_task = loop.create_task(ctx.stopped.wait())

    done, _ = await asyncio.wait(
        {health_task, gateway_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
    )

    exit_code = 0
    if stop_task not in done:
        if gateway_task in done:
            _log(f"Gateway stopped: {_task_error(gateway_task)!r}")
        if health_task in done:
            _log(f"Health server stopped: {_task_error(health_task)!r}")
        exit_code = 1
        await shutdown(ctx)

    pending = [t for t in (health_task, gateway_task) if not t.done()]
    if pending:
        await asyncio.wait(pending, timeout=_WIND_DOWN_SECONDS)
    for task in (health_task, gateway_task, stop_task):
        if not task.done():
            task.cancel()
        elif task is not stop_task:
            err = _task_error(task)
            if err is not None and exit_code == 0:
                _log(f"Error during shutdown: {err!r}")

    ctx.transition(RelayState.TERMINATED)
    return exit_code


def main() -> None:
    try:
        config = RelayConfig.from_env()
    except ConfigError as e:
        _log(str(e))
        sys.exit(1)

    ctx = build_context(config)
    sys.exit(asyncio.run(run(ctx)))


if __name__ == "__main__":
    main()
