import json
import logging
from pathlib import Path
from typing import List

from ...application_layer.input_params.register_member_params import RegisterMemberParams
from .member_params_converter import MemberParamsConverter

logger = logging.getLogger(__name__)


class MemberSeedLoader:
    """
    Reads initial members from a JSON file shaped like {"members": [{"name": ...}, ...]}.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    def load(self) -> List[RegisterMemberParams]:
        data = self.read_json()
        try:
            if data is None:
                raise ValueError("Input cannot be None")
            if not isinstance(data, dict):
                raise ValueError("Input must be a dictionary")
            if 'members' not in data:
                raise ValueError("Input must contain 'members' key")
            if not isinstance(data['members'], list):
                raise ValueError("'members' must be a list")
            params = [MemberParamsConverter.convert_json_to_params(m) for m in data['members']]
            names = set()
            for p in params:
                if p.name in names:
                    raise ValueError(f"Duplicate member name: {p.name}")
                names.add(p.name)
        except Exception as e:
            raise MemberSeedError(f"Invalid seed file {self._path}: {e}") from e
        logger.info(f"Loaded {len(params)} seed members from {self._path}")
        return params

    def read_json(self):
        try:
            with open(self._path, 'r', encoding='utf-8') as file:
                return json.load(file)
        except (OSError, json.JSONDecodeError) as e:
            raise MemberSeedError(f"Cannot read seed file {self._path}: {e}") from e


class MemberSeedError(Exception):
    """
    Exception raised when the member seed file is missing or malformed.
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"MemberSeedError: {self.message}"
