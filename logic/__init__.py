"""logic — Game systems package.

Top-level modules
-----------------
tick            — per-frame system orchestrator
motion          — cursor keys → velocity, walk cycle, idle pose
input_manager   — raw input → intent mapping
animation       — spritesheet animation registry + playback system
movement        — physics / tile collision
camera          — camera follow + bounds
entity_factory  — player spawning
"""
