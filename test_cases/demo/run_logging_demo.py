import gc

from arborlog.core.filters import LevelFilter
from arborlog.core.log_level import LogLevel
from arborlog.core.logger_registry import LoggerRegistry
from arborlog.sinks.sink_config import FileSinkConfig, PrintSinkConfig, create_sink


def main() -> None:
    with LoggerRegistry() as registry:
        app = registry.get("app")
        net = registry.get("app/net")

        console = create_sink(PrintSinkConfig(with_color=True), diagnostic=print)
        console.subscribe(app)

        errors_only = create_sink(FileSinkConfig(path="logs/demo_errors.log", min_level=LogLevel.ERROR), diagnostic=print)
        errors_only.subscribe(net)

        app.info("Demo started.")
        net.debug("Resolving peers.")
        net.error("Peer unreachable.")

        # Created after the console subscribed: not covered
        io = registry.get("app/net/io")
        io.warning("This line is not printed.")

        verbose = create_sink(PrintSinkConfig(with_color=False))
        verbose.add_filter(LevelFilter(LogLevel.WARNING))
        verbose.subscribe(io)
        io.warning("Now printed by the second console sink.")

        del verbose
        gc.collect()
        io.critical("Second console sink is gone; its reference is pruned.")
        print("-" * 60)
        print("io subscriptions:", io.sinks)

        errors_only.close()


if __name__ == "__main__":
    main()
