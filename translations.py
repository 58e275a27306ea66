translations = {
    'English': {
    'appTitle': 'EduFinance Tracker',
    'appSubtitle': 'Student loan management & analysis',
    'notifications': 'Notifications',
    'markAllRead': 'Mark all as read',
    'noNotifications': 'No notifications',
    'dashboard': 'Dashboard',
    'loans': 'Manage Loans',
    'budget': 'Budget & Goals',
    'dailyAnalysis': 'Daily Simulator',
    'learn': 'Learn & Earn',
    'aiAdvisor': 'AI Advisor',
    'welcomeTitle': 'Welcome!',
    'welcomeMsg': 'Start tracking your loans today.',
    'tipTitle': 'Tip',
    'tipMsg': 'Check the Daily Simulator to save money.',
    'badgeUnlocked': 'New Badge Unlocked!',
    'badgeEarned': 'You earned the {badgeName} badge!',
    'login': 'Sign In',
    'loginPrompt': 'Track your student loans and plan your future.',
    'language': 'Language',
    'settings': 'Settings',
    # Dashboard
    'totalStudents': 'Total Students',
    'averageSalary': 'Average Salary',
    'totalLoans': 'Total Loans',
    'averageLoan': 'Average Loan',
    'debtToIncome': 'Debt-to-Income Ratio',
    'loanVsSalary': 'Loan vs. Annual Salary',
    'annualSalary': 'Annual Salary',
    'noStudents': 'No students yet.',
    'chartFailed': 'Chart failed to load. Please try again.',
    # Manage
    'name': 'Name',
    'major': 'Major',
    'monthlySalary': 'Monthly Salary',
    'totalLoan': 'Total Loan',
    'addStudent': 'Add Student',
    'updateStudent': 'Save',
    'deleteStudent': 'Delete',
    'actions': 'Actions',
    # Budget
    'expenses': 'Expenses',
    'expenseName': 'Expense',
    'category': 'Category',
    'amount': 'Amount',
    'addExpense': 'Add Expense',
    'totalExpenses': 'Total Expenses',
    'noExpenses': 'No expenses recorded.',
    'expensesByCategory': 'Expenses by Category',
    'savingsGoals': 'Savings Goals',
    'goalTitle': 'Goal',
    'targetAmount': 'Target',
    'currentAmount': 'Saved so far',
    'color': 'Color',
    'addGoal': 'Add Goal',
    'noGoals': 'No savings goals yet.',
    'totalSaved': 'Total Saved',
    'Housing': 'Housing',
    'Food': 'Food',
    'Transport': 'Transport',
    'Education': 'Education',
    'Entertainment': 'Entertainment',
    'Other': 'Other',
    # Daily simulator
    'interestRate': 'Interest Rate (%)',
    'loanTermYears': 'Loan Term (years)',
    'dailyInterest': 'Daily Interest',
    'monthlyPayment': 'Monthly Payment',
    'totalInterest': 'Total Interest',
    'salaryShare': 'Share of Salary',
    'applySimulation': 'Update Simulation',
    # Learn
    'lessons': 'Lessons',
    'earnedBadges': 'Earned Badges',
    'noBadges': 'No badges yet. Complete a lesson to earn one!',
    'checkAnswer': 'Check Answer',
    'correctAnswer': 'Correct! Badge unlocked.',
    'wrongAnswer': 'Not quite. Read the lesson and try again.',
    'alreadyEarned': 'Badge already earned',
    'lessonInterestTitle': 'How Interest Grows',
    'lessonInterestBody': 'Interest is charged on the balance you still owe. Paying a little extra each month lowers the balance sooner, so less interest builds up over the life of the loan.',
    'lessonInterestQuestion': 'What happens when you pay extra toward your loan principal?',
    'lessonInterestA': 'You pay less interest overall',
    'lessonInterestB': 'Your interest rate goes up',
    'lessonInterestC': 'Nothing changes',
    'lessonBudgetTitle': 'The 50/30/20 Budget',
    'lessonBudgetBody': 'A simple rule splits take-home pay into 50% needs, 30% wants and 20% savings and debt repayment.',
    'lessonBudgetQuestion': 'Under the 50/30/20 rule, what share goes to savings and debt repayment?',
    'lessonBudgetA': '50%',
    'lessonBudgetB': '30%',
    'lessonBudgetC': '20%',
    'lessonEmergencyTitle': 'Emergency Funds',
    'lessonEmergencyBody': 'An emergency fund covers three to six months of essential expenses so a surprise bill does not turn into new debt.',
    'lessonEmergencyQuestion': 'How many months of expenses should an emergency fund usually cover?',
    'lessonEmergencyA': 'One week',
    'lessonEmergencyB': 'Three to six months',
    'lessonEmergencyC': 'Five years',
    # Insights
    'advisorTitle': 'Advisor Insights',
    'advisorIntro': "Personalized guidance based on each student's debt-to-income ratio.",
    'adviceNoSalary': '{name} has no recorded salary. Add income details to get a repayment plan.',
    'adviceHigh': '{name} owes {ratio:.1f}x their annual salary. Prioritize the highest-interest debt and consider income-driven repayment.',
    'adviceModerate': '{name} owes {ratio:.1f}x their annual salary. A fixed monthly payment keeps the loan on track.',
    'adviceLow': '{name} is in a healthy position. Extra payments now will save interest later.',
    # Settings and messages
    'studentsTracked': 'Students tracked',
    'studentAdded': 'Student added successfully',
    'studentUpdated': 'Student updated successfully',
    'studentDeleted': 'Student deleted',
    'expenseAdded': 'Expense added',
    'goalAdded': 'Savings goal added',
    'languageChanged': 'Language changed successfully',
    'invalidLanguage': 'Invalid language selection',
    'simulationUpdated': 'Simulation updated',
    'formInvalid': 'Please correct the errors in the form.',
    'loginRequired': 'Please sign in first.',
    'loggedIn': 'Signed in successfully',
    'pageNotFound': 'Page not found',
    'serverError': 'Something went wrong. Please try again.',
    'backHome': 'Back to dashboard',
    'footer': '© 2024 EduFinance Tracker. Background design via Canva.'
    },
    'Mandarin Chinese': {
    'appTitle': '教育财务追踪器',
    'appSubtitle': '学生贷款管理与分析',
    'notifications': '通知',
    'markAllRead': '全部标为已读',
    'noNotifications': '暂无通知',
    'dashboard': '仪表板',
    'loans': '管理贷款',
    'budget': '预算与目标',
    'dailyAnalysis': '每日模拟器',
    'learn': '学习与奖励',
    'aiAdvisor': 'AI 顾问',
    'welcomeTitle': '欢迎！',
    'welcomeMsg': '今天就开始追踪您的贷款吧。',
    'tipTitle': '提示',
    'tipMsg': '查看每日模拟器来省钱。',
    'badgeUnlocked': '新徽章已解锁！',
    'badgeEarned': '您获得了 {badgeName} 徽章！',
    'login': '登录',
    'loginPrompt': '追踪您的学生贷款，规划您的未来。',
    'language': '语言',
    'settings': '设置'
    },
    'Hindi': {
    'appTitle': 'एडुफाइनेंस ट्रैकर',
    'appSubtitle': 'छात्र ऋण प्रबंधन और विश्लेषण',
    'notifications': 'सूचनाएं',
    'markAllRead': 'सभी को पढ़ा हुआ चिह्नित करें',
    'noNotifications': 'कोई सूचना नहीं',
    'dashboard': 'डैशबोर्ड',
    'loans': 'ऋण प्रबंधन',
    'budget': 'बजट और लक्ष्य',
    'dailyAnalysis': 'दैनिक सिम्युलेटर',
    'learn': 'सीखें और कमाएं',
    'aiAdvisor': 'एआई सलाहकार',
    'welcomeTitle': 'स्वागत है!',
    'welcomeMsg': 'आज ही अपने ऋणों को ट्रैक करना शुरू करें।',
    'tipTitle': 'सुझाव',
    'tipMsg': 'पैसे बचाने के लिए दैनिक सिम्युलेटर देखें।',
    'badgeUnlocked': 'नया बैज अनलॉक हुआ!',
    'badgeEarned': 'आपने {badgeName} बैज अर्जित किया!',
    'login': 'साइन इन करें',
    'loginPrompt': 'अपने छात्र ऋणों को ट्रैक करें और अपने भविष्य की योजना बनाएं।',
    'language': 'भाषा',
    'settings': 'सेटिंग्स'
    },
    'Spanish': {
    'appTitle': 'EduFinance Tracker',
    'appSubtitle': 'Gestión y análisis de préstamos estudiantiles',
    'notifications': 'Notificaciones',
    'markAllRead': 'Marcar todo como leído',
    'noNotifications': 'No hay notificaciones',
    'dashboard': 'Panel',
    'loans': 'Gestionar préstamos',
    'budget': 'Presupuesto y metas',
    'dailyAnalysis': 'Simulador diario',
    'learn': 'Aprende y gana',
    'aiAdvisor': 'Asesor IA',
    'welcomeTitle': '¡Bienvenido!',
    'welcomeMsg': 'Empieza a seguir tus préstamos hoy.',
    'tipTitle': 'Consejo',
    'tipMsg': 'Revisa el simulador diario para ahorrar dinero.',
    'badgeUnlocked': '¡Nueva insignia desbloqueada!',
    'badgeEarned': '¡Obtuviste la insignia {badgeName}!',
    'login': 'Iniciar sesión',
    'loginPrompt': 'Sigue tus préstamos estudiantiles y planifica tu futuro.',
    'language': 'Idioma',
    'settings': 'Ajustes'
    },
    'Arabic': {
    'appTitle': 'متتبع التمويل التعليمي',
    'appSubtitle': 'إدارة وتحليل القروض الطلابية',
    'notifications': 'الإشعارات',
    'markAllRead': 'تحديد الكل كمقروء',
    'noNotifications': 'لا توجد إشعارات',
    'dashboard': 'لوحة التحكم',
    'loans': 'إدارة القروض',
    'budget': 'الميزانية والأهداف',
    'dailyAnalysis': 'المحاكي اليومي',
    'learn': 'تعلّم واكسب',
    'aiAdvisor': 'المستشار الذكي',
    'welcomeTitle': 'مرحباً!',
    'welcomeMsg': 'ابدأ بتتبع قروضك اليوم.',
    'tipTitle': 'نصيحة',
    'tipMsg': 'استخدم المحاكي اليومي لتوفير المال.',
    'badgeUnlocked': 'تم فتح شارة جديدة!',
    'badgeEarned': 'لقد حصلت على شارة {badgeName}!',
    'login': 'تسجيل الدخول',
    'loginPrompt': 'تتبّع قروضك الطلابية وخطط لمستقبلك.',
    'language': 'اللغة',
    'settings': 'الإعدادات'
    },
    'French': {
    'appTitle': 'EduFinance Tracker',
    'appSubtitle': 'Gestion et analyse des prêts étudiants',
    'notifications': 'Notifications',
    'markAllRead': 'Tout marquer comme lu',
    'noNotifications': 'Aucune notification',
    'dashboard': 'Tableau de bord',
    'loans': 'Gérer les prêts',
    'budget': 'Budget et objectifs',
    'dailyAnalysis': 'Simulateur quotidien',
    'learn': 'Apprendre et gagner',
    'aiAdvisor': 'Conseiller IA',
    'welcomeTitle': 'Bienvenue !',
    'welcomeMsg': "Commencez à suivre vos prêts dès aujourd'hui.",
    'tipTitle': 'Astuce',
    'tipMsg': 'Consultez le simulateur quotidien pour économiser.',
    'badgeUnlocked': 'Nouveau badge débloqué !',
    'badgeEarned': 'Vous avez obtenu le badge {badgeName} !',
    'login': 'Se connecter',
    'loginPrompt': 'Suivez vos prêts étudiants et planifiez votre avenir.',
    'language': 'Langue',
    'settings': 'Paramètres'
    },
    'Bengali': {
    'appTitle': 'এডুফাইন্যান্স ট্র্যাকার',
    'appSubtitle': 'ছাত্র ঋণ ব্যবস্থাপনা ও বিশ্লেষণ',
    'notifications': 'বিজ্ঞপ্তি',
    'markAllRead': 'সব পড়া হিসেবে চিহ্নিত করুন',
    'noNotifications': 'কোনো বিজ্ঞপ্তি নেই',
    'dashboard': 'ড্যাশবোর্ড',
    'loans': 'ঋণ পরিচালনা',
    'budget': 'বাজেট ও লক্ষ্য',
    'dailyAnalysis': 'দৈনিক সিমুলেটর',
    'learn': 'শিখুন ও অর্জন করুন',
    'aiAdvisor': 'এআই উপদেষ্টা',
    'welcomeTitle': 'স্বাগতম!',
    'welcomeMsg': 'আজই আপনার ঋণ ট্র্যাক করা শুরু করুন।',
    'tipTitle': 'পরামর্শ',
    'tipMsg': 'টাকা বাঁচাতে দৈনিক সিমুলেটর দেখুন।',
    'badgeUnlocked': 'নতুন ব্যাজ আনলক হয়েছে!',
    'badgeEarned': 'আপনি {badgeName} ব্যাজ অর্জন করেছেন!',
    'login': 'সাইন ইন',
    'loginPrompt': 'আপনার ছাত্র ঋণ ট্র্যাক করুন এবং ভবিষ্যতের পরিকল্পনা করুন।',
    'language': 'ভাষা',
    'settings': 'সেটিংস'
    },
    'Portuguese': {
    'appTitle': 'EduFinance Tracker',
    'appSubtitle': 'Gestão e análise de empréstimos estudantis',
    'notifications': 'Notificações',
    'markAllRead': 'Marcar tudo como lido',
    'noNotifications': 'Sem notificações',
    'dashboard': 'Painel',
    'loans': 'Gerenciar empréstimos',
    'budget': 'Orçamento e metas',
    'dailyAnalysis': 'Simulador diário',
    'learn': 'Aprenda e ganhe',
    'aiAdvisor': 'Consultor IA',
    'welcomeTitle': 'Bem-vindo!',
    'welcomeMsg': 'Comece a acompanhar seus empréstimos hoje.',
    'tipTitle': 'Dica',
    'tipMsg': 'Confira o simulador diário para economizar dinheiro.',
    'badgeUnlocked': 'Nova medalha desbloqueada!',
    'badgeEarned': 'Você ganhou a medalha {badgeName}!',
    'login': 'Entrar',
    'loginPrompt': 'Acompanhe seus empréstimos estudantis e planeje seu futuro.',
    'language': 'Idioma',
    'settings': 'Configurações'
    },
    'Russian': {
    'appTitle': 'EduFinance Tracker',
    'appSubtitle': 'Управление и анализ студенческих кредитов',
    'notifications': 'Уведомления',
    'markAllRead': 'Отметить все как прочитанные',
    'noNotifications': 'Нет уведомлений',
    'dashboard': 'Панель',
    'loans': 'Управление кредитами',
    'budget': 'Бюджет и цели',
    'dailyAnalysis': 'Ежедневный симулятор',
    'learn': 'Учись и получай',
    'aiAdvisor': 'ИИ-консультант',
    'welcomeTitle': 'Добро пожаловать!',
    'welcomeMsg': 'Начните отслеживать свои кредиты уже сегодня.',
    'tipTitle': 'Совет',
    'tipMsg': 'Загляните в ежедневный симулятор, чтобы сэкономить.',
    'badgeUnlocked': 'Открыт новый значок!',
    'badgeEarned': 'Вы получили значок {badgeName}!',
    'login': 'Войти',
    'loginPrompt': 'Отслеживайте студенческие кредиты и планируйте будущее.',
    'language': 'Язык',
    'settings': 'Настройки'
    },
    'Indonesian': {
    'appTitle': 'EduFinance Tracker',
    'appSubtitle': 'Pengelolaan dan analisis pinjaman mahasiswa',
    'notifications': 'Notifikasi',
    'markAllRead': 'Tandai semua sudah dibaca',
    'noNotifications': 'Tidak ada notifikasi',
    'dashboard': 'Dasbor',
    'loans': 'Kelola Pinjaman',
    'budget': 'Anggaran & Tujuan',
    'dailyAnalysis': 'Simulator Harian',
    'learn': 'Belajar & Dapatkan',
    'aiAdvisor': 'Penasihat AI',
    'welcomeTitle': 'Selamat datang!',
    'welcomeMsg': 'Mulai lacak pinjaman Anda hari ini.',
    'tipTitle': 'Tips',
    'tipMsg': 'Lihat Simulator Harian untuk menghemat uang.',
    'badgeUnlocked': 'Lencana baru terbuka!',
    'badgeEarned': 'Anda mendapatkan lencana {badgeName}!',
    'login': 'Masuk',
    'loginPrompt': 'Lacak pinjaman mahasiswa Anda dan rencanakan masa depan.',
    'language': 'Bahasa',
    'settings': 'Pengaturan'
    },
    'Azerbaijani': {
    'appTitle': 'EduFinance Tracker',
    'appSubtitle': 'Tələbə kreditlərinin idarə edilməsi və təhlili',
    'notifications': 'Bildirişlər',
    'markAllRead': 'Hamısını oxunmuş kimi qeyd et',
    'noNotifications': 'Bildiriş yoxdur',
    'dashboard': 'İdarə paneli',
    'loans': 'Kreditləri idarə et',
    'budget': 'Büdcə və məqsədlər',
    'dailyAnalysis': 'Gündəlik simulyator',
    'learn': 'Öyrən və qazan',
    'aiAdvisor': 'Süni intellekt məsləhətçisi',
    'welcomeTitle': 'Xoş gəlmisiniz!',
    'welcomeMsg': 'Kreditlərinizi bu gün izləməyə başlayın.',
    'tipTitle': 'Məsləhət',
    'tipMsg': 'Pula qənaət etmək üçün gündəlik simulyatora baxın.',
    'badgeUnlocked': 'Yeni nişan açıldı!',
    'badgeEarned': 'Siz {badgeName} nişanını qazandınız!',
    'login': 'Daxil ol',
    'loginPrompt': 'Tələbə kreditlərinizi izləyin və gələcəyinizi planlaşdırın.',
    'language': 'Dil',
    'settings': 'Parametrlər'
    },
    'Turkish': {
    'appTitle': 'EduFinance Tracker',
    'appSubtitle': 'Öğrenci kredisi yönetimi ve analizi',
    'notifications': 'Bildirimler',
    'markAllRead': 'Tümünü okundu olarak işaretle',
    'noNotifications': 'Bildirim yok',
    'dashboard': 'Gösterge Paneli',
    'loans': 'Kredileri Yönet',
    'budget': 'Bütçe ve Hedefler',
    'dailyAnalysis': 'Günlük Simülatör',
    'learn': 'Öğren ve Kazan',
    'aiAdvisor': 'Yapay Zeka Danışmanı',
    'welcomeTitle': 'Hoş geldiniz!',
    'welcomeMsg': 'Kredilerinizi bugün takip etmeye başlayın.',
    'tipTitle': 'İpucu',
    'tipMsg': 'Para biriktirmek için Günlük Simülatörü inceleyin.',
    'badgeUnlocked': 'Yeni rozet açıldı!',
    'badgeEarned': '{badgeName} rozetini kazandınız!',
    'login': 'Giriş Yap',
    'loginPrompt': 'Öğrenci kredilerinizi takip edin ve geleceğinizi planlayın.',
    'language': 'Dil',
    'settings': 'Ayarlar'
    }
}
