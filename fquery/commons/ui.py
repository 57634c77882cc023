from rich.console import Console

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
_verbose = False


def set_verbose(verbose: bool) -> None:
    """
    Set the verbose mode for debug messages.

    Args:
        verbose (bool): True to enable verbose mode, False to disable
    """
    global _verbose
    _verbose = verbose


def prn_info(message: str) -> None:
    """
    Prints an informational message to the console.

    Args:
        message (str): the informational message

    Returns:
        None
    """
    err_console.print(f"[reverse cyan] INFO [/] {message}")


def prn_done(message: str) -> None:
    """
    Prints a success message to the console.

    Args:
        message (str): the success message

    Returns:
        None
    """
    err_console.print(f"[reverse green] DONE [/] {message}")


def prn_warn(message: str) -> None:
    """
    Prints a warning message to the console. Warnings never stop the
    current operation.

    Args:
        message (str): the warning message

    Returns:
        None
    """
    err_console.print(f"[reverse magenta] WARN [/] {message}")


def prn_error(message: str) -> None:
    """
    Prints an error message to the console.

    Args:
        message (str): the error message

    Returns:
        None
    """
    err_console.print(f"[reverse red] ERROR [/] {message}")


def prn_dbg(message: str) -> None:
    """
    Prints a debug message to the console only if verbose mode is enabled.

    Args:
        message (str): the debug message

    Returns:
        None

    Note:
        Only prints when verbose mode is enabled via set_verbose(True).
    """
    if _verbose:
        err_console.print(f"[reverse yellow] DEBUG [/] [dim]{message}[/dim]")
