"""
Default site content
DEFAULT_* sets are inserted on startup into empty tables.
SAMPLE_* sets are demo content loaded on request by seed_samples.py.
"""
from datetime import datetime


def loc(en, ar):
    return {"en": en, "ar": ar}


TEAM = loc("Qatar Digital Solutions Team", "فريق حلول قطر الرقمية")

MOBILE_MOCKUP = "/attached_assets/generated_images/Mobile_app_mockup_clean_d2c9db56.png"
WEBSITE_MOCKUP = "/attached_assets/generated_images/Website_laptop_mockup_elegant_a69c9d74.png"


# ============== BLOG POSTS ==============

DEFAULT_BLOG_POSTS = [
    {
        "title": loc("Building Scalable Mobile Apps in Qatar", "بناء تطبيقات جوال قابلة للتوسع في قطر"),
        "slug": "scalable-mobile-apps-qatar",
        "excerpt": loc(
            "Best practices for building mobile apps that grow with your business",
            "أفضل الممارسات لبناء تطبيقات الجوال التي تنمو مع عملك",
        ),
        "content": loc(
            "Learn how we develop mobile applications that scale with your business growth in the "
            "Qatari market. We focus on performance, security, and user experience...",
            "تعرف على كيفية تطوير تطبيقات الجوال التي تنمو مع نمو عملك في السوق القطري. "
            "نحن نركز على الأداء والأمان وتجربة المستخدم...",
        ),
        "category": loc("Mobile Development", "تطوير تطبيقات الجوال"),
        "author": TEAM,
        "image_url": "/attached_assets/stock_images/modern_mobile_app_de_2ee0ae45.jpg",
        "published_at": datetime(2024, 11, 1),
    },
    {
        "title": loc("Modern Web Development Trends in Qatar 2024", "اتجاهات تطوير الويب الحديثة في قطر 2024"),
        "slug": "web-development-trends-qatar-2024",
        "excerpt": loc(
            "Stay ahead with the latest web development technologies",
            "ابق في المقدمة مع أحدث تقنيات تطوير الويب",
        ),
        "content": loc(
            "Explore the latest web development technologies and trends shaping the digital "
            "landscape in Qatar. From progressive web apps to modern frameworks...",
            "استكشف أحدث تقنيات واتجاهات تطوير الويب التي تشكل المشهد الرقمي في قطر. "
            "من تطبيقات الويب التقدمية إلى الأطر الحديثة...",
        ),
        "category": loc("Web Development", "تطوير المواقع"),
        "author": TEAM,
        "image_url": "/attached_assets/stock_images/web_development_codi_85800bb3.jpg",
        "published_at": datetime(2024, 10, 15),
    },
    {
        "title": loc("Digital Transformation for Qatari Businesses", "التحول الرقمي للشركات القطرية"),
        "slug": "digital-transformation-qatar",
        "excerpt": loc("Transform your business with digital solutions", "حوّل عملك بالحلول الرقمية"),
        "content": loc(
            "How digital solutions can transform your business operations and drive growth in "
            "Qatar's competitive market. Real case studies and insights...",
            "كيف يمكن للحلول الرقمية تحويل عمليات عملك ودفع النمو في سوق قطر التنافسي. "
            "دراسات حالة حقيقية ورؤى...",
        ),
        "category": loc("Digital Strategy", "الاستراتيجية الرقمية"),
        "author": TEAM,
        "image_url": "/attached_assets/stock_images/digital_transformati_8fee5be1.jpg",
        "published_at": datetime(2024, 9, 20),
    },
]


# ============== CAREERS ==============

DOHA = loc("Doha, Qatar", "الدوحة، قطر")
FULL_TIME = loc("Full-time", "دوام كامل")

DEFAULT_CAREERS = [
    {
        "title": loc("Senior Mobile App Developer", "مطور تطبيقات جوال أول"),
        "department": loc("Engineering", "الهندسة"),
        "location": DOHA,
        "type": FULL_TIME,
        "description": loc(
            "We're looking for an experienced mobile app developer to join our growing team in "
            "Doha. You'll work on cutting-edge mobile applications for leading Qatari businesses.",
            "نبحث عن مطور تطبيقات جوال ذو خبرة للانضمام إلى فريقنا المتنامي في الدوحة. "
            "ستعمل على تطبيقات جوال متطورة للشركات القطرية الرائدة.",
        ),
        "requirements": loc(
            [
                "5+ years of mobile development experience",
                "Expert in React Native or Flutter",
                "Strong knowledge of iOS and Android platforms",
                "Experience with Arabic RTL layouts",
                "Excellent problem-solving skills",
            ],
            [
                "أكثر من 5 سنوات من الخبرة في تطوير تطبيقات الجوال",
                "خبير في React Native أو Flutter",
                "معرفة قوية بمنصات iOS وAndroid",
                "خبرة في تخطيطات RTL العربية",
                "مهارات ممتازة في حل المشكلات",
            ],
        ),
        "responsibilities": loc(
            [
                "Develop high-quality mobile applications",
                "Collaborate with design and backend teams",
                "Write clean, maintainable code",
                "Mentor junior developers",
            ],
            [
                "تطوير تطبيقات جوال عالية الجودة",
                "التعاون مع فرق التصميم والخادم",
                "كتابة كود نظيف وقابل للصيانة",
                "توجيه المطورين المبتدئين",
            ],
        ),
        "status": "open",
    },
    {
        "title": loc("Full Stack Web Developer", "مطور ويب متكامل"),
        "department": loc("Engineering", "الهندسة"),
        "location": DOHA,
        "type": FULL_TIME,
        "description": loc(
            "Join our web development team to build modern, responsive websites for Qatar's "
            "leading businesses. Work with latest technologies and frameworks.",
            "انضم إلى فريق تطوير الويب لدينا لبناء مواقع حديثة ومتجاوبة للشركات القطرية الرائدة. "
            "اعمل مع أحدث التقنيات والأطر.",
        ),
        "requirements": loc(
            [
                "3+ years of full stack development",
                "Proficient in React, Node.js, TypeScript",
                "Experience with databases (PostgreSQL, MongoDB)",
                "Understanding of Arabic content and RTL layouts",
                "Strong communication skills",
            ],
            [
                "أكثر من 3 سنوات في التطوير المتكامل",
                "إتقان React وNode.js وTypeScript",
                "خبرة في قواعد البيانات (PostgreSQL، MongoDB)",
                "فهم المحتوى العربي وتخطيطات RTL",
                "مهارات تواصل قوية",
            ],
        ),
        "responsibilities": loc(
            [
                "Build responsive web applications",
                "Design and implement RESTful APIs",
                "Optimize application performance",
                "Work closely with designers and clients",
            ],
            [
                "بناء تطبيقات ويب متجاوبة",
                "تصميم وتنفيذ واجهات RESTful",
                "تحسين أداء التطبيقات",
                "العمل عن كثب مع المصممين والعملاء",
            ],
        ),
        "status": "open",
    },
    {
        "title": loc("UI/UX Designer", "مصمم واجهات وتجربة مستخدم"),
        "department": loc("Design", "التصميم"),
        "location": DOHA,
        "type": FULL_TIME,
        "description": loc(
            "Create beautiful, intuitive designs for mobile apps and websites that resonate with "
            "Qatari users. Join our creative team in Doha.",
            "أنشئ تصاميم جميلة وبديهية لتطبيقات الجوال والمواقع الإلكترونية التي تلقى صدى لدى "
            "المستخدمين القطريين. انضم إلى فريقنا الإبداعي في الدوحة.",
        ),
        "requirements": loc(
            [
                "3+ years of UI/UX design experience",
                "Strong portfolio showcasing mobile and web projects",
                "Proficient in Figma, Adobe XD, or Sketch",
                "Understanding of Arabic design aesthetics",
                "Experience with design systems",
            ],
            [
                "أكثر من 3 سنوات من الخبرة في تصميم UI/UX",
                "محفظة قوية تعرض مشاريع الجوال والويب",
                "إتقان Figma أو Adobe XD أو Sketch",
                "فهم جماليات التصميم العربي",
                "خبرة في أنظمة التصميم",
            ],
        ),
        "responsibilities": loc(
            [
                "Design user interfaces for mobile and web",
                "Create wireframes and prototypes",
                "Conduct user research and testing",
                "Collaborate with development teams",
            ],
            [
                "تصميم واجهات المستخدم للجوال والويب",
                "إنشاء إطارات سلكية ونماذج أولية",
                "إجراء بحوث واختبارات المستخدمين",
                "التعاون مع فرق التطوير",
            ],
        ),
        "status": "open",
    },
]


# ============== SERVICES ==============

DEFAULT_SERVICES = [
    {
        "name": loc("Startup Mobile App", "تطبيق جوال للشركات الناشئة"),
        "description": loc(
            "Perfect for startups and small businesses looking to launch their first mobile app",
            "مثالي للشركات الناشئة والصغيرة التي تتطلع إلى إطلاق تطبيق الجوال الأول",
        ),
        "price": loc("Starting from 15,000 QAR", "ابتداءً من 15,000 ريال قطري"),
        "category": "mobile",
        "features": loc(
            [
                "iOS & Android development",
                "Basic backend integration",
                "Push notifications",
                "3 months support",
                "App Store submission",
            ],
            [
                "تطوير iOS و Android",
                "تكامل خادم أساسي",
                "إشعارات فورية",
                "دعم لمدة 3 أشهر",
                "تقديم في متجر التطبيقات",
            ],
        ),
        "is_active": True,
        "display_order": 1,
    },
    {
        "name": loc("Enterprise Mobile App", "تطبيق جوال للمؤسسات"),
        "description": loc(
            "Full-featured mobile applications for established businesses with complex requirements",
            "تطبيقات جوال كاملة المواصفات للشركات الراسخة ذات المتطلبات المعقدة",
        ),
        "price": loc("Starting from 45,000 QAR", "ابتداءً من 45,000 ريال قطري"),
        "category": "mobile",
        "features": loc(
            [
                "Advanced iOS & Android development",
                "Custom backend & API",
                "Real-time features",
                "Analytics & reporting",
                "12 months premium support",
                "Security & encryption",
            ],
            [
                "تطوير iOS و Android متقدم",
                "خادم وAPI مخصص",
                "ميزات الوقت الفعلي",
                "التحليلات والتقارير",
                "دعم مميز لمدة 12 شهرًا",
                "الأمان والتشفير",
            ],
        ),
        "is_active": True,
        "display_order": 2,
    },
    {
        "name": loc("Business Website", "موقع أعمال"),
        "description": loc(
            "Professional website to establish your online presence and attract customers",
            "موقع احترافي لتأسيس وجودك على الإنترنت وجذب العملاء",
        ),
        "price": loc("Starting from 8,000 QAR", "ابتداءً من 8,000 ريال قطري"),
        "category": "website",
        "features": loc(
            [
                "Responsive design",
                "Up to 10 pages",
                "Contact form integration",
                "Arabic & English support",
                "SEO optimization",
                "3 months support",
            ],
            [
                "تصميم متجاوب",
                "حتى 10 صفحات",
                "تكامل نموذج الاتصال",
                "دعم العربية والإنجليزية",
                "تحسين محركات البحث",
                "دعم لمدة 3 أشهر",
            ],
        ),
        "is_active": True,
        "display_order": 3,
    },
    {
        "name": loc("E-commerce Website", "موقع تجارة إلكترونية"),
        "description": loc(
            "Complete online store with payment processing and inventory management",
            "متجر إلكتروني كامل مع معالجة المدفوعات وإدارة المخزون",
        ),
        "price": loc("Starting from 25,000 QAR", "ابتداءً من 25,000 ريال قطري"),
        "category": "website",
        "features": loc(
            [
                "Product catalog",
                "Shopping cart & checkout",
                "Payment gateway integration",
                "Order management system",
                "Arabic & English support",
                "Analytics dashboard",
                "6 months support",
            ],
            [
                "كتالوج المنتجات",
                "عربة التسوق والدفع",
                "تكامل بوابة الدفع",
                "نظام إدارة الطلبات",
                "دعم العربية والإنجليزية",
                "لوحة التحليلات",
                "دعم لمدة 6 أشهر",
            ],
        ),
        "is_active": True,
        "display_order": 4,
    },
    {
        "name": loc("Custom Web Application", "تطبيق ويب مخصص"),
        "description": loc(
            "Tailored web applications built to solve your specific business needs",
            "تطبيقات ويب مصممة خصيصًا لحل احتياجات عملك المحددة",
        ),
        "price": loc("Starting from 35,000 QAR", "ابتداءً من 35,000 ريال قطري"),
        "category": "website",
        "features": loc(
            [
                "Custom functionality",
                "Database design",
                "API development",
                "User authentication",
                "Admin dashboard",
                "Cloud hosting setup",
                "12 months support",
            ],
            [
                "وظائف مخصصة",
                "تصميم قاعدة البيانات",
                "تطوير API",
                "مصادقة المستخدم",
                "لوحة الإدارة",
                "إعداد الاستضافة السحابية",
                "دعم لمدة 12 شهرًا",
            ],
        ),
        "is_active": True,
        "display_order": 5,
    },
]


# ============== DEMO SAMPLES ==============

SAMPLE_PORTFOLIO_PROJECTS = [
    {
        "title": loc("Qatar Cafe Mobile App", "تطبيق مقهى قطر"),
        "category": loc("Restaurant Ordering App", "تطبيق طلب مطعم"),
        "description": loc("Online ordering and table booking system", "نظام طلب عبر الإنترنت وحجز الطاولات"),
        "type": "mobile",
        "client": loc("Qatar Cafe Group", "مجموعة مقهى قطر"),
        "challenge": loc(
            "The client needed a seamless mobile ordering experience that would reduce wait times "
            "and improve customer satisfaction during peak hours.",
            "احتاج العميل إلى تجربة طلب سلسة عبر الجوال تقلل من أوقات الانتظار وتحسن رضا العملاء "
            "خلال ساعات الذروة.",
        ),
        "solution": loc(
            "We developed a native mobile app with real-time menu updates, table booking, and "
            "integrated payment processing. The app features Arabic/English support and "
            "Qatar-specific payment methods.",
            "قمنا بتطوير تطبيق جوال أصلي مع تحديثات القائمة في الوقت الفعلي وحجز الطاولات ومعالجة "
            "الدفع المتكاملة. يدعم التطبيق اللغتين العربية والإنجليزية وطرق الدفع الخاصة بقطر.",
        ),
        "results": loc(
            "50% reduction in order processing time, 200+ daily active users within first month, "
            "4.8/5 app store rating",
            "انخفاض بنسبة 50٪ في وقت معالجة الطلب، أكثر من 200 مستخدم نشط يوميًا في الشهر الأول، "
            "تقييم 4.8/5 في متجر التطبيقات",
        ),
        "technologies": ["React Native", "Node.js", "PostgreSQL", "Stripe", "Firebase"],
        "image_url": MOBILE_MOCKUP,
    },
    {
        "title": loc("Doha Fashion Boutique", "بوتيك الدوحة للأزياء"),
        "category": loc("E-commerce Mobile App", "تطبيق تجارة إلكترونية"),
        "description": loc("Fashion retail mobile shopping experience", "تجربة تسوق أزياء عبر الجوال"),
        "type": "mobile",
        "client": loc("Doha Boutique", "بوتيك الدوحة"),
        "challenge": loc(
            "Create a luxury shopping experience on mobile that showcases high-end fashion while "
            "maintaining performance and supporting Arabic RTL layout.",
            "إنشاء تجربة تسوق فاخرة على الهاتف المحمول تعرض الأزياء الراقية مع الحفاظ على الأداء "
            "ودعم التخطيط العربي من اليمين إلى اليسار.",
        ),
        "solution": loc(
            "Built a React Native app with advanced image optimization, AR try-on features, and "
            "seamless checkout. Integrated with local payment gateways and delivery services.",
            "أنشأنا تطبيق React Native مع تحسين متقدم للصور وميزات تجربة الواقع المعزز وعملية دفع "
            "سلسة. تم الدمج مع بوابات الدفع المحلية وخدمات التوصيل.",
        ),
        "results": loc(
            "300% increase in mobile sales, 85% customer retention rate, Featured in Qatar's top "
            "shopping apps",
            "زيادة بنسبة 300٪ في المبيعات عبر الهاتف المحمول، معدل الاحتفاظ بالعملاء 85٪، مميز في "
            "أفضل تطبيقات التسوق في قطر",
        ),
        "technologies": ["React Native", "TypeScript", "GraphQL", "AWS", "AR Kit"],
        "image_url": MOBILE_MOCKUP,
    },
    {
        "title": loc("Qatar Corporate Solutions", "حلول قطر للشركات"),
        "category": loc("Business Website", "موقع أعمال"),
        "description": loc("Corporate website with Arabic/English support", "موقع شركة بدعم العربية والإنجليزية"),
        "type": "website",
        "client": loc("Qatar Corporate Ltd", "شركة قطر للشركات"),
        "challenge": loc(
            "Create a professional bilingual corporate website that reflects the company's premium "
            "brand while being fully accessible and SEO-optimized.",
            "إنشاء موقع شركة احترافي ثنائي اللغة يعكس علامة الشركة المميزة مع كونه متاحًا بالكامل "
            "ومحسنًا لمحركات البحث.",
        ),
        "solution": loc(
            "Built a modern React website with full RTL support, dynamic content management, and "
            "optimized performance. Implemented advanced SEO strategies for both languages.",
            "أنشأنا موقع React حديث مع دعم RTL الكامل وإدارة المحتوى الديناميكي والأداء المحسن. "
            "طبقنا استراتيجيات SEO متقدمة لكلا اللغتين.",
        ),
        "results": loc(
            "150% increase in organic traffic, 40% improvement in lead generation, 95/100 "
            "Lighthouse score",
            "زيادة بنسبة 150٪ في حركة المرور العضوية، تحسن بنسبة 40٪ في توليد العملاء المحتملين، "
            "درجة Lighthouse 95/100",
        ),
        "technologies": ["React", "Next.js", "Tailwind CSS", "Vercel", "Google Analytics"],
        "image_url": WEBSITE_MOCKUP,
    },
    {
        "title": loc("Doha Retail E-commerce", "التجارة الإلكترونية للتجزئة في الدوحة"),
        "category": loc("E-commerce Site", "موقع تجارة إلكترونية"),
        "description": loc("Full-featured online shopping platform", "منصة تسوق متكاملة عبر الإنترنت"),
        "type": "website",
        "client": loc("Doha Retail Store", "متجر التجزئة في الدوحة"),
        "challenge": loc(
            "Build a scalable e-commerce platform that handles high traffic, supports multiple "
            "payment gateways, and integrates with local delivery services.",
            "بناء منصة تجارة إلكترونية قابلة للتطوير تتعامل مع حركة مرور عالية وتدعم بوابات دفع "
            "متعددة وتتكامل مع خدمات التوصيل المحلية.",
        ),
        "solution": loc(
            "Developed a full-stack e-commerce solution with advanced product filtering, real-time "
            "inventory, secure payments, and automated order fulfillment.",
            "قمنا بتطوير حل تجارة إلكترونية متكامل مع تصفية المنتجات المتقدمة والمخزون في الوقت "
            "الفعلي والمدفوعات الآمنة وتنفيذ الطلبات الآلي.",
        ),
        "results": loc(
            "QR 2M+ in online sales, 10,000+ registered customers, 30% conversion rate improvement",
            "أكثر من 2 مليون ريال قطري في المبيعات عبر الإنترنت، أكثر من 10،000 عميل مسجل، "
            "تحسن بنسبة 30٪ في معدل التحويل",
        ),
        "technologies": ["Next.js", "Node.js", "PostgreSQL", "Redis", "AWS S3"],
        "image_url": WEBSITE_MOCKUP,
    },
]

SAMPLE_TESTIMONIALS = [
    {
        "client_name": loc("Ahmed Al-Mansoori", "أحمد المنصوري"),
        "client_position": loc("CEO", "الرئيس التنفيذي"),
        "client_company": loc("Qatar Cafe Group", "مجموعة مقهى قطر"),
        "rating": "5",
        "testimonial": loc(
            "Qatar Digital Solutions transformed our business with their mobile app. The ordering "
            "system reduced wait times by 50% and our customers love the seamless experience. "
            "Highly professional team!",
            "حلول قطر الرقمية حولت أعمالنا بتطبيقهم المحمول. نظام الطلب قلل أوقات الانتظار بنسبة "
            "50٪ وعملاؤنا يحبون التجربة السلسة. فريق محترف للغاية!",
        ),
        "project_type": "mobile",
    },
    {
        "client_name": loc("Fatima Al-Thani", "فاطمة الثاني"),
        "client_position": loc("Founder", "المؤسس"),
        "client_company": loc("Doha Boutique", "بوتيك الدوحة"),
        "rating": "5",
        "testimonial": loc(
            "The e-commerce app exceeded all expectations. Sales increased by 300% in the first "
            "quarter. The Arabic/English support is perfect for our customer base. "
            "Exceptional quality!",
            "تطبيق التجارة الإلكترونية فاق كل التوقعات. زادت المبيعات بنسبة 300٪ في الربع الأول. "
            "دعم العربية/الإنجليزية مثالي لقاعدة عملائنا. جودة استثنائية!",
        ),
        "project_type": "mobile",
    },
    {
        "client_name": loc("Sarah Al-Dosari", "سارة الدوسري"),
        "client_position": loc("Marketing Director", "مدير التسويق"),
        "client_company": loc("Qatar Corporate Ltd", "شركة قطر للشركات"),
        "rating": "5",
        "testimonial": loc(
            "Our new website is stunning! The bilingual design and SEO optimization brought 150% "
            "more organic traffic. Professional service from start to finish.",
            "موقعنا الجديد رائع! التصميم ثنائي اللغة وتحسين محركات البحث جلب 150٪ حركة مرور عضوية "
            "أكثر. خدمة احترافية من البداية إلى النهاية.",
        ),
        "project_type": "website",
    },
    {
        "client_name": loc("Khalid Al-Marri", "خالد المري"),
        "client_position": loc("Owner", "المالك"),
        "client_company": loc("Doha Retail Store", "متجر التجزئة في الدوحة"),
        "rating": "5",
        "testimonial": loc(
            "The e-commerce platform they built handles thousands of daily orders flawlessly. "
            "Payment integration with local gateways works perfectly. Best investment we made!",
            "منصة التجارة الإلكترونية التي بنوها تتعامل مع آلاف الطلبات اليومية بلا عيوب. تكامل "
            "الدفع مع البوابات المحلية يعمل بشكل مثالي. أفضل استثمار قمنا به!",
        ),
        "project_type": "website",
    },
]
