"""
Generators — turn a contract and a template into file content.

``template_engine`` does the substitution, ``blocks`` renders the
repeated sections, ``packaging`` attaches size/line/checksum metadata.
"""
