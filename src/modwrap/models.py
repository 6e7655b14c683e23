from pydantic import BaseModel


class ImportBinding(BaseModel):
    local_name: str
    module_path: str


class ImportBlock(BaseModel):
    bindings: list[ImportBinding] = []
    first_offset: int = -1
    last_offset: int = -1
    first_line: int = -1

    @property
    def local_names(self) -> list[str]:
        return [b.local_name for b in self.bindings]

    @property
    def module_paths(self) -> list[str]:
        return [b.module_path for b in self.bindings]


class ExportSite(BaseModel):
    start: int
    end: int
    assign_pos: int
    expression: str


class ScanResult(BaseModel):
    newline: str
    imports: ImportBlock
    export: ExportSite | None = None


class CompileReport(BaseModel):
    compiled: int = 0
    passed_through: int = 0
    copied: int = 0
