"""CSV upload endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from costsplit.api.dependencies import get_parser, get_settings
from costsplit.core.config import AppSettings
from costsplit.core.exceptions import CostSplitError, IngestionError, ValidationError
from costsplit.ingestion import BillingCsvParser
from costsplit.services.uploads import check_csv_upload, staged_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ingestion"])


@router.post("/upload")
def upload_csv(
    file: UploadFile | None = File(default=None),
    parser: BillingCsvParser = Depends(get_parser),
    settings: AppSettings = Depends(get_settings),
) -> dict:
    """Parse one vendor billing CSV into clean records."""
    if file is None:
        raise ValidationError("No file was uploaded")
    filename = file.filename or "upload.csv"
    check_csv_upload(file.filename, file.content_type)

    try:
        with staged_upload(file.file, filename, settings.upload.upload_dir) as path:
            dataset = parser.parse_file(path)
    except CostSplitError:
        raise
    except Exception as exc:
        logger.exception("Failed to process CSV upload %s", filename)
        raise IngestionError(str(exc)) from exc
    finally:
        file.file.close()

    return dataset.to_response()
