"""
Card flip core Python package.

Pure game logic for the memory/card-matching game, kept apart from the Flask
app and the terminal CLI so it can be tested on a virtual clock.
Modules:
- config.py: Difficulty, GameConfig, presets
- board.py: Board
- deal.py: paired deck + Fisher-Yates shuffle
- palette.py: symbols and colors per pair
- history.py: MatchHistory
- scheduler.py: ThreadingScheduler, ManualScheduler
- state.py: GameState state machine and GameSnapshot
"""
