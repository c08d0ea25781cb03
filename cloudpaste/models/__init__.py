from cloudpaste.models.paste_model import NewPasteModel, PasteModel, serialize_paste, deserialize_paste


__all__ = [
    'NewPasteModel',
    'PasteModel',
    'serialize_paste',
    'deserialize_paste',
]
