"""Localisation tables.

The reactive core stores only the locale code; these tables are read by the
presentation layer through the settings store's `strings` computed.

// [LAW:one-source-of-truth] SUPPORTED_LANGUAGES is derived from STRINGS keys.
"""

DEFAULT_LANGUAGE = "en"

LANGUAGE_LABELS: dict[str, str] = {
    "en": "English",
    "zh-CN": "简体中文",
    "zh-TW": "繁體中文",
    "de": "Deutsch",
    "ja": "日本語",
    "ko": "한국어",
    "fr": "Français",
    "es": "Español",
}

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "appName": "Focus Forest",
        "dashboard": "Dashboard",
        "forest": "My Forest",
        "rooms": "Study Rooms",
        "stats": "Statistics",
        "settings": "Settings",
        "language": "Language",
        "whatToFocusOn": "What to focus on?",
        "start": "Start Focus",
        "finish": "Finish Session",
        "taskCompleted": "Task Completed!",
        "plantTree": "Plant a Tree",
        "invite": "Invite",
        "createRoom": "Create Room",
        "themeColor": "Theme Color",
        "viewBy": "View by:",
        "daily": "Daily",
        "weekly": "Weekly",
        "monthly": "Monthly",
        "yearly": "Yearly",
        "task": "task",
        "tasks": "tasks",
        "username": "Username",
        "fontSize": "Font Size",
        "small": "Small",
        "medium": "Medium",
        "large": "Large",
        "profile": "Profile",
        "appearance": "Appearance",
        "comingSoon": "feature coming soon.",
    },
    "zh-CN": {
        "appName": "专注森林",
        "dashboard": "仪表盘",
        "forest": "我的森林",
        "rooms": "自习室",
        "stats": "统计",
        "settings": "设置",
        "language": "语言",
        "whatToFocusOn": "专注什么？",
        "start": "开始专注",
        "finish": "完成",
        "taskCompleted": "任务完成！",
        "plantTree": "种一棵树",
        "invite": "邀请",
        "createRoom": "创建自习室",
        "themeColor": "主题颜色",
        "viewBy": "查看方式：",
        "daily": "每日",
        "weekly": "每周",
        "monthly": "每月",
        "yearly": "每年",
        "task": "项任务",
        "tasks": "项任务",
        "username": "用户名",
        "fontSize": "字体大小",
        "small": "小",
        "medium": "中",
        "large": "大",
        "profile": "个人资料",
        "appearance": "外观",
        "comingSoon": "功能即将推出。",
    },
    "zh-TW": {
        "appName": "專注森林",
        "dashboard": "儀表板",
        "forest": "我的森林",
        "rooms": "自習室",
        "stats": "統計",
        "settings": "設定",
        "language": "語言",
        "whatToFocusOn": "專注什麼？",
        "start": "開始專注",
        "finish": "完成",
        "taskCompleted": "任務完成！",
        "plantTree": "種一棵樹",
        "invite": "邀請",
        "createRoom": "創建自習室",
        "themeColor": "主題顏色",
        "viewBy": "查看方式：",
        "daily": "每日",
        "weekly": "每週",
        "monthly": "每月",
        "yearly": "每年",
        "task": "項任務",
        "tasks": "項任務",
        "username": "用戶名",
        "fontSize": "字體大小",
        "small": "小",
        "medium": "中",
        "large": "大",
        "profile": "個人資料",
        "appearance": "外觀",
        "comingSoon": "功能即將推出。",
    },
    "de": {
        "appName": "Fokuswald",
        "dashboard": "Dashboard",
        "forest": "Mein Wald",
        "rooms": "Studienräume",
        "stats": "Statistiken",
        "settings": "Einstellungen",
        "language": "Sprache",
        "whatToFocusOn": "Worauf konzentrieren?",
        "start": "Fokus starten",
        "finish": "Sitzung beenden",
        "taskCompleted": "Aufgabe abgeschlossen!",
        "plantTree": "Einen Baum pflanzen",
        "invite": "Einladen",
        "createRoom": "Raum erstellen",
        "themeColor": "Themenfarbe",
        "viewBy": "Anzeigen nach:",
        "daily": "Täglich",
        "weekly": "Wöchentlich",
        "monthly": "Monatlich",
        "yearly": "Jährlich",
        "task": "Aufgabe",
        "tasks": "Aufgaben",
        "username": "Benutzername",
        "fontSize": "Schriftgröße",
        "small": "Klein",
        "medium": "Mittel",
        "large": "Groß",
        "profile": "Profil",
        "appearance": "Erscheinungsbild",
        "comingSoon": "Funktion folgt in Kürze.",
    },
    "ja": {
        "appName": "集中フォレスト",
        "dashboard": "ダッシュボード",
        "forest": "私の森",
        "rooms": "自習室",
        "stats": "統計",
        "settings": "設定",
        "language": "言語",
        "whatToFocusOn": "何に集中しますか？",
        "start": "集中開始",
        "finish": "セッション終了",
        "taskCompleted": "タスク完了！",
        "plantTree": "木を植える",
        "invite": "招待",
        "createRoom": "ルームを作成",
        "themeColor": "テーマカラー",
        "viewBy": "表示順：",
        "daily": "毎日",
        "weekly": "毎週",
        "monthly": "毎月",
        "yearly": "毎年",
        "task": "タスク",
        "tasks": "タスク",
        "username": "ユーザー名",
        "fontSize": "フォントサイズ",
        "small": "小",
        "medium": "中",
        "large": "大",
        "profile": "プロフィール",
        "appearance": "外観",
        "comingSoon": "機能は近日公開予定です。",
    },
    "ko": {
        "appName": "집중의 숲",
        "dashboard": "대시보드",
        "forest": "나의 숲",
        "rooms": "스터디룸",
        "stats": "통계",
        "settings": "설정",
        "language": "언어",
        "whatToFocusOn": "무엇에 집중할까요?",
        "start": "집중 시작",
        "finish": "세션 종료",
        "taskCompleted": "작업 완료!",
        "plantTree": "나무 심기",
        "invite": "초대하기",
        "createRoom": "스터디룸 만들기",
        "themeColor": "테마 색상",
        "viewBy": "보기 기준:",
        "daily": "매일",
        "weekly": "매주",
        "monthly": "매월",
        "yearly": "매년",
        "task": "개의 작업",
        "tasks": "개의 작업",
        "username": "사용자 이름",
        "fontSize": "글꼴 크기",
        "small": "작음",
        "medium": "중간",
        "large": "큼",
        "profile": "프로필",
        "appearance": "모양",
        "comingSoon": "기능이 곧 제공됩니다.",
    },
    "fr": {
        "appName": "Forêt de Concentration",
        "dashboard": "Tableau de bord",
        "forest": "Ma Forêt",
        "rooms": "Salles d'étude",
        "stats": "Statistiques",
        "settings": "Paramètres",
        "language": "Langue",
        "whatToFocusOn": "Sur quoi se concentrer ?",
        "start": "Commencer la concentration",
        "finish": "Terminer la session",
        "taskCompleted": "Tâche terminée !",
        "plantTree": "Planter un arbre",
        "invite": "Inviter",
        "createRoom": "Créer une salle",
        "themeColor": "Couleur du thème",
        "viewBy": "Afficher par :",
        "daily": "Quotidien",
        "weekly": "Hebdomadaire",
        "monthly": "Mensuel",
        "yearly": "Annuel",
        "task": "tâche",
        "tasks": "tâches",
        "username": "Nom d'utilisateur",
        "fontSize": "Taille de la police",
        "small": "Petit",
        "medium": "Moyen",
        "large": "Grand",
        "profile": "Profil",
        "appearance": "Apparence",
        "comingSoon": "fonctionnalité bientôt disponible.",
    },
    "es": {
        "appName": "Bosque de Enfoque",
        "dashboard": "Tablero",
        "forest": "Mi Bosque",
        "rooms": "Salas de estudio",
        "stats": "Estadísticas",
        "settings": "Configuración",
        "language": "Idioma",
        "whatToFocusOn": "¿En qué concentrarse?",
        "start": "Iniciar Enfoque",
        "finish": "Finalizar Sesión",
        "taskCompleted": "¡Tarea completada!",
        "plantTree": "Plantar un árbol",
        "invite": "Invitar",
        "createRoom": "Crear Sala",
        "themeColor": "Color del Tema",
        "viewBy": "Ver por:",
        "daily": "Diario",
        "weekly": "Semanal",
        "monthly": "Mensual",
        "yearly": "Anual",
        "task": "tarea",
        "tasks": "tareas",
        "username": "Nombre de usuario",
        "fontSize": "Tamaño de fuente",
        "small": "Pequeño",
        "medium": "Mediano",
        "large": "Grande",
        "profile": "Perfil",
        "appearance": "Apariencia",
        "comingSoon": "función disponible próximamente.",
    },
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(STRINGS)


def strings_for(language: str) -> dict[str, str]:
    """Table for `language`, falling back to English for unknown codes."""
    return STRINGS.get(language) or STRINGS[DEFAULT_LANGUAGE]


def task_noun(strings: dict[str, str], count: int) -> str:
    return strings["task"] if count == 1 else strings["tasks"]
