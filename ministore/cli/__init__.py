"""
ministore CLI

Commands:
- ministore replay - Replay a JSONL action file through a reducer
- ministore version - Show version information
"""
