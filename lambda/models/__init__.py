from .models import AnalysisRequest, AnalysisResult, ErrorResponse, Language, LanguageList, LANGUAGES

__all__ = ['AnalysisRequest', 'AnalysisResult', 'ErrorResponse', 'Language', 'LanguageList', 'LANGUAGES']
