"""
Test utilities package for phrase-sync tests.

## Available Modules

### phrase_api.py
Stub Phrase API served through ``httpx.MockTransport``:
- `FakePhraseAPI`: Scripted upload, status, exclude and include endpoints
  that record every request
- `RecordingSleep`: Replacement for ``time.sleep`` that records delays
- `processing()` / `success()`: Upload status responses

## Usage Examples

```python
from tests.utils.phrase_api import FakePhraseAPI, success

api = FakePhraseAPI()
api.status_responses = [success(5)]
api.records_affected = 5
```
"""

from __future__ import annotations

from .phrase_api import FakePhraseAPI, RecordingSleep, processing, success

__all__ = [
    "FakePhraseAPI",
    "RecordingSleep",
    "processing",
    "success",
]
