from abc import ABC, abstractmethod
from typing import List


class BaseDetailSource(ABC):
    @abstractmethod
    def fetch_detail_rows(self, node_id: str) -> List[str]:
        pass
