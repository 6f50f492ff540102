import os
import re
import docx2txt
import PyPDF2
import logging

logger = logging.getLogger(__name__)

PDF_EXTENSIONS = {'.pdf'}
WORD_EXTENSIONS = {'.docx'}


class ExtractionError(Exception):
    """Raised when no usable text can be read from an uploaded document."""


class DocumentProcessor:
    def __init__(self):
        self.text_cleaning_patterns = [
            (r'[ \t\r\f\v]+', ' '),  # Runs of spaces/tabs to single space
            (r' *\n *', '\n'),  # Trim around line breaks
            (r'\n{2,}', '\n'),  # Blank lines to single newline
        ]

    def extract_text(self, file_path: str) -> str:
        """
        Extract text from a PDF or Word file.

        Unknown extensions are tried as PDF first and then as Word.
        Raises ExtractionError with a user-facing reason on failure.
        """
        extension = os.path.splitext(file_path)[1].lower()

        if extension in PDF_EXTENSIONS:
            text = self.extract_pdf_text(file_path)
            kind = "PDF"
        elif extension in WORD_EXTENSIONS:
            text = self.extract_word_text(file_path)
            kind = "Word document"
        else:
            logger.info(f"Unknown extension '{extension}', trying PDF then Word")
            text = self._try_extract(self.extract_pdf_text, file_path) or \
                self._try_extract(self.extract_word_text, file_path)
            if not text:
                raise ExtractionError("Unsupported file type. Please upload a PDF or Word document")
            kind = "document"

        cleaned_text = self.clean_text(text)
        if not cleaned_text:
            raise ExtractionError(f"No text could be extracted from {kind}")

        logger.info(f"Extracted {len(cleaned_text)} characters from {kind}")
        return cleaned_text

    def extract_pdf_text(self, file_path: str) -> str:
        try:
            with open(file_path, 'rb') as file:
                pdf_reader = PyPDF2.PdfReader(file)
                pages = [page.extract_text() or "" for page in pdf_reader.pages]
        except Exception as e:
            logger.error(f"Error extracting text from PDF: {str(e)}")
            raise ExtractionError("Could not extract text from PDF") from e
        return "\n".join(pages)

    def extract_word_text(self, file_path: str) -> str:
        try:
            return docx2txt.process(file_path) or ""
        except Exception as e:
            logger.error(f"Error extracting text from Word document: {str(e)}")
            raise ExtractionError("Could not extract text from Word document") from e

    @staticmethod
    def _try_extract(extractor, file_path: str) -> str:
        try:
            return extractor(file_path)
        except ExtractionError:
            return ""

    def clean_text(self, text: str) -> str:
        """
        Normalize whitespace, keeping line breaks and bullet glyphs
        """
        for pattern, replacement in self.text_cleaning_patterns:
            text = re.sub(pattern, replacement, text)

        return text.strip()
