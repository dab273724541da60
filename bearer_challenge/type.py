from typing import Callable, Dict, List, Mapping, Tuple

AuthParamListType = List[Tuple[str, str]]
ExtensionDictType = Dict[str, str]
ExtensionMappingType = Mapping[str, str]
AddNoteMethodType = Callable[..., None]
