"""Source file path relativization.

Errors record the absolute path of the file that created them. Before the
path leaves the process (serialized payloads, logs shipped elsewhere) the
server's document root is stripped so internal directory layout is not
disclosed.
"""


def relativize_path(path: str, document_root: str | None) -> str:
    """Strip the document root from an absolute path.

    Args:
        path: Absolute source file path.
        document_root: Root to strip. None or empty disables relativization.

    Returns:
        The part of path after the first occurrence of document_root, with
        leading separators removed. The path unchanged when document_root
        is empty or does not occur in it.

    Example:
        >>> relativize_path("/var/www/site/app/models.py", "/var/www/site")
        'app/models.py'
        >>> relativize_path("/opt/lib/models.py", "/var/www/site")
        '/opt/lib/models.py'
    """
    if not document_root:
        return path

    index = path.find(document_root)
    if index == -1:
        return path

    return path[index + len(document_root) :].lstrip("/\\")
