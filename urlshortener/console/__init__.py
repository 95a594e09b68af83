from urlshortener.console.app import main, run, handle_command, build_manager


__all__ = [
    'main',
    'run',
    'handle_command',
    'build_manager',
]
