from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional


@dataclass
class Symbol:
    name: str
    type: str  # 'int' o 'float'
    index: Optional[int] = None  # posicion del token del nombre


class SymbolTable:
    """Tabla plana, sin scopes: un nombre se declara una sola vez por analisis."""

    def __init__(self) -> None:
        self.symbols: Dict[str, Symbol] = {}

    def declare(self, name: str, symbol: Symbol) -> bool:
        """Devuelve False si el nombre ya existe; nunca sobrescribe."""
        if name in self.symbols:
            return False
        self.symbols[name] = symbol
        return True

    def lookup(self, name: str) -> Optional[Symbol]:
        return self.symbols.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def as_mapping(self) -> Dict[str, str]:
        return {name: sym.type for name, sym in self.symbols.items()}

    def snapshot(self) -> List[Dict[str, object]]:
        """Devuelve una vista serializable de la tabla de simbolos."""
        return [
            {"name": sym.name, "type": sym.type, "index": sym.index}
            for sym in self.symbols.values()
        ]
