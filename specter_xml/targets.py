def open_target_list(path):
    return open(path, "r", encoding="utf-8", errors="replace")


def iter_targets(lines):
    """
    Yield raw target lines one at a time, without the trailing newline.

    Blank and whitespace-only lines are passed through; the engine drops them.
    """
    for line in lines:
        yield line.rstrip("\r\n")
