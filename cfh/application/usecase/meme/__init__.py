"""Meme use cases."""

from .common import MemeItem
from .create_meme import CreateMemeRequest, CreateMemeResponse, CreateMemeUseCase
from .get_meme import GetMemeRequest, GetMemeResponse, GetMemeUseCase
from .list_memes import ListMemesRequest, ListMemesResponse, ListMemesUseCase

__all__ = [
    "MemeItem",
    "CreateMemeRequest",
    "CreateMemeResponse",
    "CreateMemeUseCase",
    "GetMemeRequest",
    "GetMemeResponse",
    "GetMemeUseCase",
    "ListMemesRequest",
    "ListMemesResponse",
    "ListMemesUseCase",
]
