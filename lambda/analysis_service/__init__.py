from .analysis import analyze_word, extract_target_sentence, build_prompts, AnalysisError

__all__ = ['analyze_word', 'extract_target_sentence', 'build_prompts', 'AnalysisError']
