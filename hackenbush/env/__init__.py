from .gym_env import HackenbushEnv

__all__ = ["HackenbushEnv"]
