# ann/src/azuraforge_ann/reporting.py

import os
import logging
import json
from datetime import datetime
from typing import Any, Dict, List
import matplotlib.pyplot as plt

def set_professional_style():
    """Matplotlib için profesyonel bir stil ayarlar."""
    try:
        plt.style.use('seaborn-v0_8-whitegrid')
        plt.rcParams.update({
            'font.family': 'sans-serif', 'font.sans-serif': 'DejaVu Sans',
            'figure.figsize': (12, 7), 'axes.labelweight': 'bold',
            'axes.titleweight': 'bold', 'grid.color': '#dddddd',
        })
    except OSError as e:
        logging.warning(f"Matplotlib stili yüklenemedi: {e}. Varsayılan kullanılacak.")

def plot_error_history(history: Dict[str, List[float]], save_path: str, max_error: float = None):
    """Epoch başına doğrulama hatasını çizer ve kaydeder."""
    set_professional_style()
    fig, ax = plt.subplots()
    ax.plot(range(1, len(history.get('error', [])) + 1), history.get('error', []), label='Doğrulama Hatası')
    if max_error is not None:
        ax.axhline(max_error, color='k', linestyle='dashed', linewidth=1, label=f'Yakınsama Eşiği: {max_error}')
    ax.set_title('Ağ Öğrenme Eğrisi')
    ax.set_xlabel('Epoch')
    ax.set_ylabel('Hata')
    ax.legend()
    ax.grid(True)
    fig.savefig(save_path)
    plt.close(fig)

def generate_training_report(results: Dict[str, Any], config: Dict[str, Any]):
    """
    Eğitim sonuçlarından bir Markdown raporu oluşturur.

    `results` en az 'history' ve 'final_error' içermelidir; `config` ise
    'experiment_dir' anahtarını taşımalıdır.
    """
    experiment_dir = config.get('experiment_dir')
    if not experiment_dir:
        logging.error("Rapor oluşturmak için 'experiment_dir' konfigürasyonda bulunamadı.")
        return

    report_name = config.get('experiment_name', 'Bilinmeyen Deney')
    img_dir = os.path.join(experiment_dir, "images")
    os.makedirs(img_dir, exist_ok=True)
    report_path = os.path.join(experiment_dir, "report.md")
    logging.info(f"Eğitim raporu oluşturuluyor: {report_path}")

    max_error = config.get('training_params', {}).get('max_error')
    error_img_path = os.path.join(img_dir, "error_history.png")
    if results.get('history', {}).get('error'):
        plot_error_history(results['history'], save_path=error_img_path, max_error=max_error)

    epochs_run = len(results.get('history', {}).get('error', []))
    final_error = results.get('final_error')

    with open(report_path, "w", encoding="utf-8") as f:
        f.write(f"# Eğitim Raporu: {report_name}\n\n")
        f.write(f"**Rapor Tarihi:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
        f.write("## 1. Performans Özeti\n\n")
        f.write(f"- **Çalışan Epoch Sayısı:** `{epochs_run}`\n")
        if final_error is not None:
            f.write(f"- **Son Doğrulama Hatası:** `{final_error:.6f}`\n")
        if max_error is not None and final_error is not None:
            status = "Evet" if final_error < max_error else "Hayır"
            f.write(f"- **Yakınsadı mı:** {status}\n")
        f.write("\n")

        f.write("## 2. Eğitim Süreci\n\n")
        f.write("Bu grafik, doğrulama batch'i üzerindeki hatanın epoch'lara göre değişimini gösterir.\n\n")
        if os.path.exists(error_img_path):
            f.write(f"![Hata Geçmişi](images/{os.path.basename(error_img_path)})\n\n")

        f.write("## 3. Deney Konfigürasyonu\n\n")
        f.write("```json\n")
        f.write(json.dumps(config, indent=4, default=str))
        f.write("\n```\n")
