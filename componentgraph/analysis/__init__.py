"""Analysis package - turns source text into units, links and state slots.

Modules, leaf first:
- lexer: comment stripping, token scanning, markup invocation scanning
- classifier: component / hook / utility detection
- imports: local import extraction
- linker: import and render edges with passed parameters
- state_flow: state slot detection and consumer tracing
- assembler: degrees and pruning
- analyzer: the two-pass orchestrator
"""
