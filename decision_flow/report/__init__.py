from .loss_report import build_loss_table, result_to_dict, save_result

__all__ = ['build_loss_table', 'result_to_dict', 'save_result']
